from hybrid_reasoner.api.routes.reason import reason_bp
from hybrid_reasoner.api.routes.monitoring import monitoring_bp

__all__ = ['reason_bp', 'monitoring_bp']
