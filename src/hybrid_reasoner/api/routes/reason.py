import time
import logging
from typing import Any, Dict, List
from flask import Blueprint, request, jsonify
from flasgger import swag_from
from pydantic import ValidationError

from hybrid_reasoner.api import config, state, dependencies, models
from hybrid_reasoner.api.extensions import limiter

logger = logging.getLogger("api")

reason_bp = Blueprint('reason', __name__)


@reason_bp.route("/api/reason", methods=["POST"])
@limiter.limit(config.REASON_RATE_LIMIT)
@swag_from({
    'tags': ['reason'],
    'consumes': ['application/json'],
    'parameters': [{
        'name': 'body', 'in': 'body', 'required': True,
        'schema': {
            'type': 'object',
            'properties': {
                'query': {'type': 'string'},
                'mode': {'type': 'string', 'enum': ['auto']},
                'k': {'type': 'integer'}
            },
            'required': ['query']
        }
    }],
    'responses': {
        200: {'description': 'Planner decision, best match and trace'},
        400: {'description': 'Invalid request'},
        503: {'description': 'Engine not loaded'}
    }
})
def reason():
    auth = dependencies.require_api_key()
    if auth:
        return auth
    if state.engine is None:
        return jsonify({"error": "Reasoning engine not loaded"}), 503

    raw = request.get_json(silent=True)
    if not isinstance(raw, dict):
        return jsonify({"error": "Body must be a JSON object"}), 400
    try:
        parsed = models.ReasonRequest(**raw)
    except ValidationError as ve:
        return jsonify({"error": "validation_failed", "details": ve.errors(include_url=False)}), 400

    try:
        result = dependencies.run_reasoning(parsed.normalized_query(), parsed.k)
    except Exception as e:
        logger.exception("[api] reasoning failed")
        return jsonify({"error": str(e)}), 500
    return jsonify(result)


@reason_bp.route("/api/reason/batch", methods=["POST"])
@limiter.limit(config.BATCH_RATE_LIMIT)
@swag_from({
    'tags': ['reason'],
    'consumes': ['application/json'],
    'parameters': [{
        'name': 'body', 'in': 'body', 'required': True,
        'schema': {
            'type': 'object',
            'properties': {
                'queries': {'type': 'array', 'items': {'type': 'string'}},
                'k': {'type': 'integer'}
            },
            'required': ['queries']
        }
    }],
    'responses': {
        200: {'description': 'Batch reasoning results'},
        400: {'description': 'Invalid request'},
        413: {'description': 'Too many queries in batch'}
    }
})
def reason_batch():
    """
    Reason over multiple queries in a single request.

    Items that are not strings or exceed the query length limit are reported
    in ``errors`` by index; the rest are answered in order.
    """
    auth = dependencies.require_api_key()
    if auth:
        return auth
    if state.engine is None:
        return jsonify({"error": "Reasoning engine not loaded"}), 503

    raw = request.get_json(silent=True)
    if raw is None or not isinstance(raw, dict):
        return jsonify({"error": "Expected JSON object with 'queries' array"}), 400

    queries = raw.get('queries', [])
    if not isinstance(queries, list):
        return jsonify({"error": "'queries' must be an array"}), 400
    try:
        # Items are checked one by one below; only the shared fields fail the request
        k = models.BatchReasonRequest(queries=[], k=raw.get('k')).k
    except ValidationError as ve:
        return jsonify({"error": "validation_failed", "details": ve.errors(include_url=False)}), 400

    if len(queries) > config.BATCH_SIZE_LIMIT:
        return jsonify({
            "error": f"Batch size exceeds limit of {config.BATCH_SIZE_LIMIT}",
            "submitted": len(queries),
            "limit": config.BATCH_SIZE_LIMIT
        }), 413

    if len(queries) == 0:
        return jsonify({
            "results": [],
            "errors": [],
            "count": 0,
            "error_count": 0,
            "timing_ms": 0
        })

    start_time = time.perf_counter()
    results: List[Dict[str, Any]] = []
    errors: List[Dict[str, Any]] = []

    for idx, query in enumerate(queries):
        try:
            parsed = models.ReasonRequest(query=query, k=k)
        except ValidationError as ve:
            errors.append({"index": idx, "error": "validation_failed", "details": ve.errors(include_url=False)})
            continue
        try:
            result = dependencies.run_reasoning(parsed.normalized_query(), parsed.k)
        except Exception as e:
            logger.exception(f"[api] batch item {idx} failed")
            errors.append({"index": idx, "error": str(e)})
            continue
        results.append({"index": idx, "query": parsed.normalized_query(), **result})

    elapsed_ms = (time.perf_counter() - start_time) * 1000

    return jsonify({
        "results": results,
        "errors": errors,
        "count": len(results),
        "error_count": len(errors),
        "timing_ms": round(elapsed_ms, 2),
        "avg_ms_per_query": round(elapsed_ms / len(queries), 2)
    })


@reason_bp.route("/api/corpus", methods=["GET"])
def corpus():
    if state.engine is None:
        return jsonify({"error": "Reasoning engine not loaded"}), 503
    docs = state.engine.corpus()
    return jsonify({
        "source": state.corpus_source,
        "count": len(docs),
        "vocabulary_size": len(state.engine.vocabulary),
        "documents": [{"index": d.index, "text": d.text} for d in docs],
    })
