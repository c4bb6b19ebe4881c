from typing import Any, Dict, Optional
import threading
import time

from hybrid_reasoner.engine import ReasoningEngine

# Global Engine State
engine: Optional[ReasoningEngine] = None
corpus_source: str = "default"

# Reasoning Stats (for monitoring)
_stats_lock = threading.Lock()
reasoning_stats: Dict[str, Any] = {
    'total_queries': 0,
    'fallback_count': 0,
    'decisions': {},
    'last_query_time': None,
    'avg_latency_ms': 0.0,
    '_latency_sum': 0.0,
}

# Metrics
REQUEST_COUNT: Any = None
REQUEST_LATENCY: Any = None
REASONING_TOTAL: Any = None
REASONING_LATENCY: Any = None


def update_reasoning_stats(decision: str, used_fallback: bool, latency_ms: float) -> None:
    """Update reasoning statistics for monitoring."""
    with _stats_lock:
        total = int(reasoning_stats.get('total_queries') or 0) + 1
        reasoning_stats['total_queries'] = total
        reasoning_stats['last_query_time'] = time.time()

        latency_sum = float(reasoning_stats.get('_latency_sum') or 0.0) + float(latency_ms)
        reasoning_stats['_latency_sum'] = latency_sum
        reasoning_stats['avg_latency_ms'] = latency_sum / total

        decisions = reasoning_stats.setdefault('decisions', {})
        decisions[decision] = int(decisions.get(decision) or 0) + 1

        if used_fallback:
            reasoning_stats['fallback_count'] = int(reasoning_stats.get('fallback_count') or 0) + 1


def snapshot_reasoning_stats() -> Dict[str, Any]:
    with _stats_lock:
        stats = dict(reasoning_stats)
        stats['decisions'] = dict(reasoning_stats.get('decisions') or {})
    # Remove internal tracking fields
    stats.pop('_latency_sum', None)
    total = stats.get('total_queries') or 0
    stats['fallback_rate'] = (stats['fallback_count'] / total) if total else None
    return stats


def reset_reasoning_stats() -> None:
    with _stats_lock:
        reasoning_stats.update({
            'total_queries': 0,
            'fallback_count': 0,
            'decisions': {},
            'last_query_time': None,
            'avg_latency_ms': 0.0,
            '_latency_sum': 0.0,
        })
