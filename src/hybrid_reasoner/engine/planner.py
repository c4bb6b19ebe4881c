"""Rule-based tool selection.

The planner is an ordered list of rules evaluated against the query and the
best score of each ranker. Non-terminal rules only append a note to the
reasoning; the first terminal rule that matches decides. The last rule always
matches, so a decision is always reached.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple

from hybrid_reasoner.engine.rankers import RankedHit

__all__ = ["PlannerDecision", "PlanContext", "PlanResult", "Rule", "RULES", "plan"]

LONG_QUERY_WORDS = 5
STRONG_KEYWORD = 0.6
CLEAR_WIN = 0.5
CLEAR_LOSS = 0.3
CLOSE_DIFF = 0.15
CLOSE_MIN_SEMANTIC = 0.2


class PlannerDecision(str, Enum):
    SEMANTIC_SEARCH = "semantic_search"
    KEYWORD_SEARCH = "keyword_search"
    HYBRID = "hybrid"


@dataclass(frozen=True)
class PlanContext:
    word_count: int
    semantic_best: float
    keyword_best: float

    @property
    def score_diff(self) -> float:
        return abs(self.semantic_best - self.keyword_best)

    @property
    def is_long(self) -> bool:
        return self.word_count > LONG_QUERY_WORDS

    @classmethod
    def from_hits(cls, query: str, semantic_hits: Sequence[RankedHit], keyword_hits: Sequence[RankedHit]) -> "PlanContext":
        return cls(
            word_count=len((query or "").split()),
            semantic_best=semantic_hits[0].score if semantic_hits else 0.0,
            keyword_best=keyword_hits[0].score if keyword_hits else 0.0,
        )


@dataclass(frozen=True)
class PlanResult:
    decision: PlannerDecision
    reasoning: str
    rule: str


@dataclass(frozen=True)
class Rule:
    name: str
    predicate: Callable[[PlanContext], bool]
    note: Callable[[PlanContext], str]
    decision: Optional[PlannerDecision] = None

    @property
    def terminal(self) -> bool:
        return self.decision is not None


RULES: Tuple[Rule, ...] = (
    Rule(
        "long_query_note",
        lambda c: c.is_long,
        lambda c: f"Query is long ({c.word_count} words, >{LONG_QUERY_WORDS}). Semantic search preferred. ",
    ),
    Rule(
        "strong_keyword_note",
        lambda c: c.keyword_best > STRONG_KEYWORD,
        lambda c: f"Strong keyword match (score: {c.keyword_best:.2f}). Keyword search is effective. ",
    ),
    Rule(
        "semantic_clear_win",
        lambda c: c.semantic_best > CLEAR_WIN and c.keyword_best < CLEAR_LOSS,
        lambda c: f"Semantic clearly wins ({c.semantic_best:.2f} vs {c.keyword_best:.2f}). ",
        PlannerDecision.SEMANTIC_SEARCH,
    ),
    Rule(
        "keyword_clear_win",
        lambda c: c.keyword_best > CLEAR_WIN and c.semantic_best < CLEAR_LOSS,
        lambda c: f"Keyword clearly wins ({c.keyword_best:.2f} vs {c.semantic_best:.2f}). ",
        PlannerDecision.KEYWORD_SEARCH,
    ),
    Rule(
        "scores_close",
        lambda c: c.score_diff < CLOSE_DIFF and c.semantic_best > CLOSE_MIN_SEMANTIC,
        lambda c: f"Scores are close (diff: {c.score_diff:.2f}). Running hybrid search. ",
        PlannerDecision.HYBRID,
    ),
    Rule(
        "long_query_default",
        lambda c: c.is_long,
        lambda c: "Defaulting to semantic.",
        PlannerDecision.SEMANTIC_SEARCH,
    ),
    Rule(
        "hybrid_default",
        lambda c: True,
        lambda c: "Defaulting to hybrid for balanced coverage. ",
        PlannerDecision.HYBRID,
    ),
)


def plan(
    query: str,
    semantic_hits: Sequence[RankedHit],
    keyword_hits: Sequence[RankedHit],
    rules: Sequence[Rule] = RULES,
) -> PlanResult:
    """Pick a search strategy for ``query`` given both rankers' top hits."""
    ctx = PlanContext.from_hits(query, semantic_hits, keyword_hits)
    reasoning = ""
    for rule in rules:
        if not rule.predicate(ctx):
            continue
        reasoning += rule.note(ctx)
        if rule.terminal:
            return PlanResult(decision=rule.decision, reasoning=reasoning, rule=rule.name)  # type: ignore[arg-type]
    # Only reachable with a custom rule list lacking a catch-all
    return PlanResult(decision=PlannerDecision.HYBRID, reasoning=reasoning, rule="none")
