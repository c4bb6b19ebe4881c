import logging
from typing import Any, Dict, Optional
from flask import request, jsonify

from hybrid_reasoner.api import config, state
from hybrid_reasoner.engine import EngineResult, ReasoningEngine, load_corpus

logger = logging.getLogger("api")


def load_engine(corpus_path: Optional[str] = None) -> ReasoningEngine:
    """Build the engine from CORPUS_PATH, falling back to the default corpus."""
    path = config.CORPUS_PATH if corpus_path is None else corpus_path
    documents = None
    source = "default"
    if path:
        try:
            documents = load_corpus(path)
            source = path
        except (OSError, ValueError) as e:
            logger.error(f"[api] Failed to load corpus from {path}: {e}; using default corpus")

    state.engine = ReasoningEngine(
        documents=documents,
        top_k=config.TOP_K,
        confidence_threshold=config.CONFIDENCE_THRESHOLD,
        snippet_chars=config.TRACE_SNIPPET_CHARS,
    )
    state.corpus_source = source
    logger.info(f"[api] Engine ready ({len(state.engine.documents)} documents from {source})")
    return state.engine


def require_api_key():
    if config.API_KEY:
        key = request.headers.get("X-API-Key", "")
        if key != config.API_KEY:
            return jsonify({"error": "Unauthorized"}), 401
    return None


def run_reasoning(query: str, k: Optional[int] = None) -> Dict[str, Any]:
    """Run the engine and record stats/metrics; returns the JSON-ready result."""
    engine = state.engine
    if engine is None:
        raise RuntimeError("Reasoning engine not loaded")
    result: EngineResult = engine.reason(query, top_k=k)
    record_result(result)
    return result.to_dict()


def record_result(result: EngineResult) -> None:
    decision = result.decision.value
    state.update_reasoning_stats(decision, result.used_fallback, result.trace.latency_ms)
    try:
        if state.REASONING_TOTAL:
            state.REASONING_TOTAL.labels(decision, str(result.used_fallback).lower()).inc()
        if state.REASONING_LATENCY:
            state.REASONING_LATENCY.observe(result.trace.latency_ms / 1000.0)
    except Exception as e:
        logger.warning(f"[api] metrics update failed: {e}")
