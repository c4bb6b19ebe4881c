"""Semantic and keyword rankers.

Both rankers precompute their per-document state (term-frequency rows, token
sets) at construction and only allocate fresh query-side values per call.
Sorting is stable, so equal scores keep corpus order. Scores keep full
precision until the hit is built, where they are rounded to 4 decimals.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from hybrid_reasoner.engine.corpus import Document
from hybrid_reasoner.engine.tokenizer import keyword_tokens
from hybrid_reasoner.engine.vector_index import VectorIndex, vectorize

__all__ = ["RankedHit", "SemanticRanker", "KeywordRanker", "SCORE_DECIMALS"]

SCORE_DECIMALS = 4


@dataclass(frozen=True)
class RankedHit:
    text: str
    score: float

    def to_dict(self) -> Dict[str, object]:
        return {"text": self.text, "score": self.score}


def _clamp(score: float) -> float:
    return min(1.0, max(0.0, score))


def _top(scored: List[Tuple[Document, float]], top_k: int) -> List[RankedHit]:
    ranked = sorted(scored, key=lambda pair: -pair[1])
    return [RankedHit(text=doc.text, score=round(score, SCORE_DECIMALS)) for doc, score in ranked[:top_k]]


class SemanticRanker:
    """Ranks documents by cosine similarity of term-frequency vectors."""

    def __init__(self, documents: Sequence[Document], index: Optional[VectorIndex] = None):
        self.documents = tuple(documents)
        self.index = index if index is not None else VectorIndex.build(self.documents)

    def search(self, query: str, top_k: int = 3) -> List[RankedHit]:
        if top_k <= 0:
            return []
        query_vec = vectorize(query or "", self.index.vocabulary)
        sims = self.index.similarities(query_vec)
        scored = [(doc, _clamp(float(sim))) for doc, sim in zip(self.documents, sims)]
        # No minimum-score filter: zero-similarity hits are legitimate output
        return _top(scored, top_k)


class KeywordRanker:
    """Ranks documents by the fraction of query tokens present in each document."""

    def __init__(self, documents: Sequence[Document]):
        self.documents = tuple(documents)
        self._token_sets: Tuple[FrozenSet[str], ...] = tuple(
            frozenset(keyword_tokens(doc.text)) for doc in self.documents
        )

    def search(self, query: str, top_k: int = 3) -> List[RankedHit]:
        if top_k <= 0:
            return []
        query_tokens = keyword_tokens(query or "")
        denom = max(len(query_tokens), 1)
        scored: List[Tuple[Document, float]] = []
        for doc, doc_tokens in zip(self.documents, self._token_sets):
            # Membership per query-token occurrence: repeated query tokens count each time
            matches = sum(1 for tok in query_tokens if tok in doc_tokens)
            score = _clamp(matches / denom)
            if score > 0:
                scored.append((doc, score))
        return _top(scored, top_k)
