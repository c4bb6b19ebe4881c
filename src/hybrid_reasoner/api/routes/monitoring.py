import os
import platform
from flask import Blueprint, jsonify, Response

from hybrid_reasoner.api import config, state

monitoring_bp = Blueprint('monitoring', __name__)


@monitoring_bp.route("/metrics", methods=["GET"])
def metrics():
    from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)


@monitoring_bp.route("/version", methods=["GET"])
def version():
    engine = state.engine
    corpus_meta = None
    if engine is not None:
        corpus_meta = {
            "source": state.corpus_source,
            "documents": len(engine.documents),
            "vocabulary_size": len(engine.vocabulary),
            "top_k": engine.top_k,
            "confidence_threshold": engine.confidence_threshold,
        }
    return jsonify({
        "version": config.APP_VERSION,
        "env": config.APP_ENV,
        "commit": os.getenv("GIT_COMMIT"),
        "python": platform.python_version(),
        "corpus": corpus_meta,
    })


@monitoring_bp.route("/api/version", methods=["GET"])
def api_version():
    return version()


@monitoring_bp.route("/api/health", methods=["GET"])
def health():
    if state.engine is None:
        return jsonify({"status": "error", "detail": "Reasoning engine not loaded"}), 503
    try:
        result = state.engine.reason("healthcheck")
        return jsonify({"status": "ok", "decision": result.decision.value}), 200
    except Exception as e:
        return jsonify({"status": "error", "detail": str(e)}), 500


@monitoring_bp.route("/api/health/ready", methods=["GET"])
def health_ready():
    """Readiness probe - checks if the engine is built and has a corpus."""
    checks = {
        'engine_loaded': state.engine is not None,
        'corpus_loaded': state.engine is not None and len(state.engine.documents) > 0,
    }
    all_ready = all(checks.values())
    return jsonify({
        "ready": all_ready,
        "checks": checks
    }), 200 if all_ready else 503


@monitoring_bp.route("/api/health/live", methods=["GET"])
def health_live():
    """Liveness probe - minimal check that service is running."""
    return jsonify({"alive": True}), 200


@monitoring_bp.route("/api/stats/reasoning", methods=["GET"])
def reasoning_stats():
    """Return reasoning statistics for monitoring."""
    return jsonify(state.snapshot_reasoning_stats())
