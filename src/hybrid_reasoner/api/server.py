"""HTTP host for the reasoning engine.

The engine itself never raises on a query; everything that can fail here
(bad bodies, missing engine, rate limits) is reported as an HTTP error.
"""
import time
import uuid
import json
import logging
from datetime import datetime, timezone
from flask import Flask, request, g
from flask_cors import CORS
from flasgger import Swagger
from prometheus_client import Counter, Histogram
import sentry_sdk
from sentry_sdk.integrations.flask import FlaskIntegration

from hybrid_reasoner.api import config, state, dependencies
from hybrid_reasoner.api.routes import reason_bp, monitoring_bp
from hybrid_reasoner.api.extensions import limiter

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger("api")


def _register_metrics() -> None:
    if state.REQUEST_COUNT is not None:
        return
    try:
        state.REQUEST_COUNT = Counter('hybrid_reasoner_requests_total', 'Total HTTP requests', ['method', 'endpoint', 'status'])
        state.REQUEST_LATENCY = Histogram('hybrid_reasoner_request_latency_seconds', 'Request latency in seconds', ['endpoint'])
        state.REASONING_TOTAL = Counter('hybrid_reasoner_reasoning_total', 'Reasoning calls served', ['decision', 'used_fallback'])
        state.REASONING_LATENCY = Histogram('hybrid_reasoner_reasoning_latency_seconds', 'Engine latency in seconds')
    except ValueError:
        # Already registered with the default registry (module reloaded)
        logger.warning("[api] Prometheus metrics already registered")


def _init_sentry() -> None:
    if not config.SENTRY_DSN:
        return
    try:
        sentry_sdk.init(
            dsn=config.SENTRY_DSN,
            integrations=[FlaskIntegration()],
            traces_sample_rate=config.SENTRY_TRACES_SAMPLE_RATE,
            profiles_sample_rate=config.SENTRY_PROFILES_SAMPLE_RATE,
            environment=config.APP_ENV,
            release=config.APP_VERSION,
        )
        logger.info("Sentry initialized")
    except Exception as e:
        logger.error(f"Sentry init failed: {e}")


def _access_log(response, duration: float) -> None:
    log_obj = {
        "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "lvl": "info",
        "request_id": getattr(g, 'request_id', None),
        "method": request.method,
        "path": request.path,
        "status": response.status_code,
        "duration_ms": int(duration * 1000),
        "remote_addr": request.headers.get('X-Forwarded-For', request.remote_addr),
        "ua": request.headers.get('User-Agent'),
    }
    logger.info(json.dumps(log_obj, ensure_ascii=False))


def create_app(load_engine: bool = True) -> Flask:
    _register_metrics()
    _init_sentry()

    flask_app = Flask(__name__)
    CORS(flask_app)
    Swagger(flask_app)
    flask_app.config['MAX_CONTENT_LENGTH'] = config.MAX_CONTENT_LENGTH

    limiter.init_app(flask_app)
    flask_app.register_blueprint(reason_bp)
    flask_app.register_blueprint(monitoring_bp)

    @flask_app.before_request
    def _before_request():
        g.request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        g.started_at = time.time()
        g.endpoint_for_metrics = request.endpoint or request.path

    @flask_app.after_request
    def _after_request(response):
        duration = time.time() - getattr(g, 'started_at', time.time())
        _access_log(response, duration)
        try:
            ep = getattr(g, 'endpoint_for_metrics', request.path)
            if state.REQUEST_COUNT:
                state.REQUEST_COUNT.labels(request.method, ep, response.status_code).inc()
            if state.REQUEST_LATENCY:
                state.REQUEST_LATENCY.labels(ep).observe(duration)
        except Exception as e:
            logger.warning(f"[api] request metrics update failed: {e}")
        if getattr(g, 'request_id', None):
            response.headers["X-Request-ID"] = g.request_id
        return response

    if load_engine:
        dependencies.load_engine()
    return flask_app


app = create_app()

if __name__ == "__main__":
    app.run(debug=True, port=5002, host="0.0.0.0")
