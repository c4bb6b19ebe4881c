"""Term-frequency vector space built once from the corpus.

Vocabulary order is first-seen order over the corpus (documents front to back,
tokens left to right); a token's position is its dimension in every vector.
Query words outside the vocabulary are dropped during vectorization.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple

import numpy as np

from hybrid_reasoner.engine.corpus import Document
from hybrid_reasoner.engine.tokenizer import semantic_tokens

__all__ = ["Vocabulary", "VectorIndex", "build_vocabulary", "vectorize", "cosine_similarity"]


@dataclass(frozen=True)
class Vocabulary:
    tokens: Tuple[str, ...]
    positions: Mapping[str, int] = field(repr=False, compare=False)

    def __len__(self) -> int:
        return len(self.tokens)

    def __contains__(self, token: object) -> bool:
        return token in self.positions


def build_vocabulary(documents: Iterable[Document]) -> Vocabulary:
    positions: Dict[str, int] = {}
    for doc in documents:
        for token in semantic_tokens(doc.text):
            if token not in positions:
                positions[token] = len(positions)
    return Vocabulary(tokens=tuple(positions), positions=MappingProxyType(positions))


def vectorize(text: str, vocabulary: Vocabulary) -> np.ndarray:
    vec = np.zeros(len(vocabulary), dtype=np.float64)
    for token in semantic_tokens(text):
        idx = vocabulary.positions.get(token)
        if idx is not None:
            vec[idx] += 1.0
    return vec


def cosine_similarity(a: np.ndarray, b: np.ndarray) -> float:
    """Cosine of two equal-length vectors; 0.0 when either one is all zeros."""
    if a.shape != b.shape:
        raise ValueError(f"Vector length mismatch: {a.shape} vs {b.shape}")
    mag_a = float(np.linalg.norm(a))
    mag_b = float(np.linalg.norm(b))
    if mag_a == 0.0 or mag_b == 0.0:
        return 0.0
    return float(np.dot(a, b)) / (mag_a * mag_b)


@dataclass(frozen=True, eq=False)
class VectorIndex:
    """Document term-frequency matrix over a fixed vocabulary.

    Rows follow corpus order. The matrix and its row norms are read-only so
    one index can serve concurrent queries.
    """
    vocabulary: Vocabulary
    matrix: np.ndarray = field(repr=False)
    norms: np.ndarray = field(repr=False)

    @classmethod
    def build(cls, documents: Tuple[Document, ...]) -> "VectorIndex":
        vocabulary = build_vocabulary(documents)
        if documents:
            matrix = np.vstack([vectorize(doc.text, vocabulary) for doc in documents])
        else:
            matrix = np.zeros((0, len(vocabulary)), dtype=np.float64)
        norms = np.linalg.norm(matrix, axis=1)
        matrix.setflags(write=False)
        norms.setflags(write=False)
        return cls(vocabulary=vocabulary, matrix=matrix, norms=norms)

    def similarities(self, query_vec: np.ndarray) -> np.ndarray:
        """Cosine similarity of ``query_vec`` against every document row."""
        if query_vec.shape != (self.matrix.shape[1],):
            raise ValueError(f"Query vector shape {query_vec.shape} does not match vocabulary size {self.matrix.shape[1]}")
        sims = np.zeros(self.matrix.shape[0], dtype=np.float64)
        q_norm = float(np.linalg.norm(query_vec))
        if q_norm == 0.0 or sims.size == 0:
            return sims
        dots = self.matrix @ query_vec
        denom = self.norms * q_norm
        np.divide(dots, denom, out=sims, where=denom > 0)
        return sims
