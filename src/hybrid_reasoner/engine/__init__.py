"""Hybrid retrieval and planning engine."""

from hybrid_reasoner.engine.corpus import (
    DEFAULT_DOCUMENTS,
    Document,
    build_corpus,
    load_corpus,
)
from hybrid_reasoner.engine.tokenizer import (
    keyword_tokens,
    semantic_tokens,
    tokenize,
)
from hybrid_reasoner.engine.vector_index import (
    VectorIndex,
    Vocabulary,
    build_vocabulary,
    cosine_similarity,
    vectorize,
)
from hybrid_reasoner.engine.rankers import (
    KeywordRanker,
    RankedHit,
    SemanticRanker,
)
from hybrid_reasoner.engine.planner import (
    PlannerDecision,
    PlanResult,
    plan,
)
from hybrid_reasoner.engine.orchestrator import (
    BestMatch,
    EngineResult,
    NO_RESULTS,
    ReasoningEngine,
    ReasoningTrace,
)

__all__ = [
    # Corpus
    "DEFAULT_DOCUMENTS",
    "Document",
    "build_corpus",
    "load_corpus",
    # Tokenization and vectors
    "tokenize",
    "semantic_tokens",
    "keyword_tokens",
    "Vocabulary",
    "VectorIndex",
    "build_vocabulary",
    "vectorize",
    "cosine_similarity",
    # Ranking and planning
    "RankedHit",
    "SemanticRanker",
    "KeywordRanker",
    "PlannerDecision",
    "PlanResult",
    "plan",
    # Engine
    "BestMatch",
    "EngineResult",
    "NO_RESULTS",
    "ReasoningEngine",
    "ReasoningTrace",
]
