"""Reasoning engine: runs both rankers, plans, selects and falls back.

``ReasoningEngine.reason`` never raises for string input. Weak or empty
rankings degrade to the best positive hit across both rankers, and finally to
the ``No results found`` sentinel, with ``used_fallback`` set so callers can
tell a low-confidence answer from a confident one.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from hybrid_reasoner.engine.corpus import DEFAULT_DOCUMENTS, Document, build_corpus
from hybrid_reasoner.engine.planner import PlannerDecision, plan
from hybrid_reasoner.engine.rankers import KeywordRanker, RankedHit, SemanticRanker
from hybrid_reasoner.engine.vector_index import VectorIndex, Vocabulary

__all__ = [
    "BestMatch",
    "EngineResult",
    "ReasoningEngine",
    "ReasoningTrace",
    "NO_RESULTS",
    "fallback_best",
    "select_best",
]

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 3
DEFAULT_CONFIDENCE_THRESHOLD = 0.75
DEFAULT_SNIPPET_CHARS = 50
RESULT_SOURCE = "local"

NO_RESULTS = RankedHit(text="No results found", score=0.0)


@dataclass(frozen=True)
class BestMatch:
    text: str
    score: float
    source: str = RESULT_SOURCE

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "score": self.score, "source": self.source}


@dataclass(frozen=True)
class ReasoningTrace:
    reasoning: str
    semantic_top_k: List[RankedHit] = field(default_factory=list)
    keyword_top_k: List[RankedHit] = field(default_factory=list)
    latency_ms: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "reasoning": self.reasoning,
            "semantic_top_k": [h.to_dict() for h in self.semantic_top_k],
            "keyword_top_k": [h.to_dict() for h in self.keyword_top_k],
            "latency_ms": self.latency_ms,
        }


@dataclass(frozen=True)
class EngineResult:
    decision: PlannerDecision
    used_fallback: bool
    best_match: BestMatch
    trace: ReasoningTrace

    def to_dict(self) -> Dict[str, Any]:
        return {
            "decision": self.decision.value,
            "used_fallback": self.used_fallback,
            "best_match": self.best_match.to_dict(),
            "trace": self.trace.to_dict(),
        }


def select_best(
    decision: PlannerDecision,
    semantic_hits: Sequence[RankedHit],
    keyword_hits: Sequence[RankedHit],
) -> Optional[RankedHit]:
    """Provisional best match for a planner decision, or None if that ranker is empty."""
    semantic_top = semantic_hits[0] if semantic_hits else None
    keyword_top = keyword_hits[0] if keyword_hits else None
    if decision is PlannerDecision.SEMANTIC_SEARCH:
        return semantic_top
    if decision is PlannerDecision.KEYWORD_SEARCH:
        return keyword_top
    # Hybrid: semantic must strictly beat keyword, so equal scores go to keyword
    if keyword_top is None:
        return semantic_top
    if semantic_top is not None and semantic_top.score > keyword_top.score:
        return semantic_top
    return keyword_top


def fallback_best(semantic_hits: Sequence[RankedHit], keyword_hits: Sequence[RankedHit]) -> RankedHit:
    """Highest positive-scoring hit across both rankers, else the sentinel."""
    merged = sorted([*semantic_hits, *keyword_hits], key=lambda h: -h.score)
    if merged and merged[0].score > 0:
        return merged[0]
    return NO_RESULTS


class ReasoningEngine:
    """Hybrid semantic/keyword retrieval with rule-based planning.

    The corpus, vocabulary and document vectors are built once here and are
    read-only afterwards; concurrent ``reason`` calls need no locking.
    """

    def __init__(
        self,
        documents: Optional[Sequence[str]] = None,
        top_k: int = DEFAULT_TOP_K,
        confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD,
        snippet_chars: int = DEFAULT_SNIPPET_CHARS,
    ):
        self.documents = build_corpus(DEFAULT_DOCUMENTS if documents is None else documents)
        self.top_k = top_k
        self.confidence_threshold = confidence_threshold
        self.snippet_chars = snippet_chars
        self.index = VectorIndex.build(self.documents)
        self.semantic_ranker = SemanticRanker(self.documents, self.index)
        self.keyword_ranker = KeywordRanker(self.documents)
        logger.info(
            f"[engine] Built vocabulary of {len(self.vocabulary)} tokens from {len(self.documents)} documents"
        )

    @property
    def vocabulary(self) -> Vocabulary:
        return self.index.vocabulary

    def corpus(self) -> List[Document]:
        return list(self.documents)

    def _snippet(self, hit: RankedHit) -> RankedHit:
        return RankedHit(text=hit.text[: self.snippet_chars] + "...", score=hit.score)

    def reason(self, query: str, top_k: Optional[int] = None) -> EngineResult:
        if not isinstance(query, str):
            query = "" if query is None else str(query)
        k = self.top_k if top_k is None else top_k

        started = time.perf_counter()
        semantic_hits = self.semantic_ranker.search(query, k)
        keyword_hits = self.keyword_ranker.search(query, k)

        planned = plan(query, semantic_hits, keyword_hits)
        best = select_best(planned.decision, semantic_hits, keyword_hits)

        used_fallback = False
        if best is None or best.score < self.confidence_threshold:
            used_fallback = True
            best = fallback_best(semantic_hits, keyword_hits)

        best_match = BestMatch(text=best.text or NO_RESULTS.text, score=round(best.score, 2))
        semantic_trace = [self._snippet(h) for h in semantic_hits]
        keyword_trace = [self._snippet(h) for h in keyword_hits]
        latency_ms = int(round((time.perf_counter() - started) * 1000))

        logger.debug(
            f"[engine] query={query!r} decision={planned.decision.value} rule={planned.rule} "
            f"fallback={used_fallback} score={best_match.score}"
        )
        return EngineResult(
            decision=planned.decision,
            used_fallback=used_fallback,
            best_match=best_match,
            trace=ReasoningTrace(
                reasoning=planned.reasoning,
                semantic_top_k=semantic_trace,
                keyword_top_k=keyword_trace,
                latency_ms=latency_ms,
            ),
        )
