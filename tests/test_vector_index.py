import numpy as np
import pytest

from hybrid_reasoner.engine.corpus import build_corpus
from hybrid_reasoner.engine.vector_index import (
    VectorIndex,
    build_vocabulary,
    cosine_similarity,
    vectorize,
)


@pytest.fixture
def docs():
    return build_corpus(["Bravo alpha charlie", "charlie delta bravo bravo", "an ox"])


def test_vocabulary_first_seen_order(docs):
    vocab = build_vocabulary(docs)
    assert vocab.tokens == ("bravo", "alpha", "charlie", "delta")
    assert vocab.positions["delta"] == 3
    assert "ox" not in vocab
    assert len(vocab) == 4


def test_vocabulary_is_read_only(docs):
    vocab = build_vocabulary(docs)
    with pytest.raises(TypeError):
        vocab.positions["new"] = 9  # type: ignore[index]


def test_vectorize_counts_and_ignores_unknown_tokens(docs):
    vocab = build_vocabulary(docs)
    vec = vectorize("delta Delta zulu bravo", vocab)
    assert vec.tolist() == [1.0, 0.0, 0.0, 2.0]
    assert vectorize("", vocab).tolist() == [0.0, 0.0, 0.0, 0.0]


def test_cosine_similarity_basics():
    a = np.array([1.0, 2.0, 0.0])
    assert cosine_similarity(a, a) == pytest.approx(1.0)
    assert cosine_similarity(a, np.array([0.0, 0.0, 3.0])) == 0.0
    assert cosine_similarity(a, np.zeros(3)) == 0.0
    assert cosine_similarity(np.zeros(3), np.zeros(3)) == 0.0


def test_cosine_similarity_length_mismatch():
    with pytest.raises(ValueError):
        cosine_similarity(np.ones(2), np.ones(3))


def test_index_self_similarity(docs):
    index = VectorIndex.build(docs)
    for i, doc in enumerate(docs[:2]):
        sims = index.similarities(vectorize(doc.text, index.vocabulary))
        assert sims[i] == pytest.approx(1.0)


def test_index_zero_vector_document_scores_zero(docs):
    index = VectorIndex.build(docs)
    sims = index.similarities(vectorize("bravo", index.vocabulary))
    assert sims[2] == 0.0
    assert sims[0] == pytest.approx(1 / np.sqrt(3))


def test_index_matches_pairwise_cosine(docs):
    index = VectorIndex.build(docs)
    q = vectorize("alpha bravo delta", index.vocabulary)
    sims = index.similarities(q)
    for i, doc in enumerate(docs):
        expected = cosine_similarity(q, vectorize(doc.text, index.vocabulary))
        assert sims[i] == pytest.approx(expected)


def test_index_is_immutable(docs):
    index = VectorIndex.build(docs)
    assert not index.matrix.flags.writeable
    with pytest.raises(ValueError):
        index.matrix[0, 0] = 5.0


def test_empty_corpus_index():
    index = VectorIndex.build(build_corpus([]))
    assert len(index.vocabulary) == 0
    assert index.similarities(vectorize("anything", index.vocabulary)).size == 0
