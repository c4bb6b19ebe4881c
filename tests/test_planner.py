import pytest

from hybrid_reasoner.engine.planner import RULES, PlanContext, PlannerDecision, plan
from hybrid_reasoner.engine.rankers import RankedHit


def hits(*scores):
    return [RankedHit(f"doc {i}", s) for i, s in enumerate(scores)]


def test_semantic_clear_win():
    result = plan("short query", hits(0.8), hits(0.2))
    assert result.decision is PlannerDecision.SEMANTIC_SEARCH
    assert result.rule == "semantic_clear_win"
    assert result.reasoning == "Semantic clearly wins (0.80 vs 0.20). "


def test_keyword_clear_win_with_strong_keyword_note():
    result = plan("blockchain", hits(0.1), hits(1.0))
    assert result.decision is PlannerDecision.KEYWORD_SEARCH
    assert result.reasoning == (
        "Strong keyword match (score: 1.00). Keyword search is effective. "
        "Keyword clearly wins (1.00 vs 0.10). "
    )


def test_scores_close_runs_hybrid():
    result = plan("two words", hits(0.4), hits(0.5))
    assert result.decision is PlannerDecision.HYBRID
    assert result.rule == "scores_close"
    assert result.reasoning == "Scores are close (diff: 0.10). Running hybrid search. "


def test_close_scores_need_semantic_above_floor():
    result = plan("two words", hits(0.15), hits(0.2))
    assert result.rule == "hybrid_default"


def test_long_query_defaults_to_semantic():
    # 6 words: long-query note fires first, no terminal rule until the default
    result = plan("neural networks and deep learning models", hits(0.45), hits(0.25))
    assert result.decision is PlannerDecision.SEMANTIC_SEARCH
    assert result.rule == "long_query_default"
    assert result.reasoning == (
        "Query is long (6 words, >5). Semantic search preferred. Defaulting to semantic."
    )


def test_five_words_is_not_long():
    result = plan("neural networks and deep learning", hits(0.45), hits(0.25))
    assert result.decision is PlannerDecision.HYBRID
    assert result.reasoning == "Defaulting to hybrid for balanced coverage. "


def test_long_query_note_kept_when_later_rule_decides():
    result = plan("one two three four five six seven", hits(0.9), hits(0.1))
    assert result.decision is PlannerDecision.SEMANTIC_SEARCH
    assert result.rule == "semantic_clear_win"
    assert result.reasoning.startswith("Query is long (7 words, >5). Semantic search preferred. ")


def test_empty_inputs_default_to_hybrid():
    result = plan("", [], [])
    assert result.decision is PlannerDecision.HYBRID
    assert result.reasoning == "Defaulting to hybrid for balanced coverage. "


def test_best_score_is_first_hit_or_zero():
    ctx = PlanContext.from_hits("a b", hits(0.7, 0.9), [])
    assert ctx.semantic_best == 0.7
    assert ctx.keyword_best == 0.0
    assert ctx.word_count == 2


def test_plan_is_deterministic():
    args = ("cloud computing resources", hits(0.55, 0.2), hits(0.66, 0.33))
    first = plan(*args)
    assert all(plan(*args) == first for _ in range(5))


@pytest.mark.parametrize(
    "semantic,keyword,expected",
    [
        (0.51, 0.29, "semantic_clear_win"),
        (0.5, 0.29, "hybrid_default"),
        (0.29, 0.51, "keyword_clear_win"),
        (0.3, 0.51, "hybrid_default"),
        (0.3, 0.4, "scores_close"),
        (0.3, 0.9, "hybrid_default"),
    ],
)
def test_threshold_boundaries(semantic, keyword, expected):
    assert plan("q", hits(semantic), hits(keyword)).rule == expected


def test_rule_order():
    names = [r.name for r in RULES]
    assert names == [
        "long_query_note",
        "strong_keyword_note",
        "semantic_clear_win",
        "keyword_clear_win",
        "scores_close",
        "long_query_default",
        "hybrid_default",
    ]
    assert [r.terminal for r in RULES] == [False, False, True, True, True, True, True]
