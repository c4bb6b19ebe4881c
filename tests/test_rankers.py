import math

import pytest

from hybrid_reasoner.engine.corpus import DEFAULT_DOCUMENTS, build_corpus
from hybrid_reasoner.engine.rankers import KeywordRanker, RankedHit, SemanticRanker


@pytest.fixture(scope="module")
def corpus():
    return build_corpus(DEFAULT_DOCUMENTS)


@pytest.fixture(scope="module")
def semantic(corpus):
    return SemanticRanker(corpus)


@pytest.fixture(scope="module")
def keyword(corpus):
    return KeywordRanker(corpus)


def test_semantic_machine_learning(semantic):
    hits = semantic.search("machine learning", 3)
    assert [h.text for h in hits] == [DEFAULT_DOCUMENTS[0], DEFAULT_DOCUMENTS[1], DEFAULT_DOCUMENTS[4]]
    assert hits[0].score == round(2 / math.sqrt(22), 4)
    # Equal scores keep corpus order
    assert hits[1].score == hits[2].score == round(1 / math.sqrt(22), 4)


def test_semantic_self_similarity(semantic):
    for doc in DEFAULT_DOCUMENTS:
        top = semantic.search(doc, 1)[0]
        assert top.text == doc
        assert top.score == 1.0


def test_semantic_returns_zero_scores_without_filtering(semantic):
    hits = semantic.search("", 3)
    assert [h.text for h in hits] == list(DEFAULT_DOCUMENTS[:3])
    assert all(h.score == 0.0 for h in hits)


def test_semantic_unknown_words_are_ignored(semantic):
    hits = semantic.search("zzzz qqqq blockchain", 1)
    assert hits[0].text == DEFAULT_DOCUMENTS[10]
    assert hits[0].score == round(1 / 3, 4)


def test_semantic_top_k_bounds(semantic):
    assert len(semantic.search("computing", 5)) == 5
    assert len(semantic.search("computing", 50)) == len(DEFAULT_DOCUMENTS)
    assert semantic.search("computing", 0) == []


def test_keyword_machine_learning(keyword):
    hits = keyword.search("machine learning", 3)
    assert hits == [
        RankedHit(DEFAULT_DOCUMENTS[0], 1.0),
        RankedHit(DEFAULT_DOCUMENTS[1], 0.5),
        RankedHit(DEFAULT_DOCUMENTS[4], 0.5),
    ]


def test_keyword_identical_query_scores_one(keyword):
    for doc in DEFAULT_DOCUMENTS:
        hits = keyword.search(doc, 1)
        assert hits[0].text == doc
        assert hits[0].score == 1.0


def test_keyword_drops_zero_scores(keyword):
    assert keyword.search("zzzz qqqq", 3) == []
    assert keyword.search("", 3) == []
    assert all(h.score > 0 for h in keyword.search("the data", 10))


def test_keyword_counts_repeated_query_tokens():
    ranker = KeywordRanker(build_corpus(["apple pie", "banana split"]))
    # "apple" twice in the query counts twice, once in the document is enough
    hits = ranker.search("apple apple banana", 3)
    assert hits == [RankedHit("apple pie", round(2 / 3, 4)), RankedHit("banana split", round(1 / 3, 4))]


def test_keyword_document_duplicates_do_not_inflate():
    ranker = KeywordRanker(build_corpus(["kiwi kiwi kiwi", "kiwi mango"]))
    hits = ranker.search("kiwi mango", 3)
    assert hits == [RankedHit("kiwi mango", 1.0), RankedHit("kiwi kiwi kiwi", 0.5)]


def test_rankers_on_empty_corpus():
    docs = build_corpus([])
    assert SemanticRanker(docs).search("anything", 3) == []
    assert KeywordRanker(docs).search("anything", 3) == []


def test_ranked_hit_to_dict():
    assert RankedHit("doc", 0.25).to_dict() == {"text": "doc", "score": 0.25}
