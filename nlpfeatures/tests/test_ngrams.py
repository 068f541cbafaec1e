import math

import pytest
from nltk.metrics import BigramAssocMeasures

from nlpfeatures.core.ngrams.builder import (
    bigrams,
    filter_by_frequency,
    ngram_frequencies,
    ngrams,
    word_frequencies,
)
from nlpfeatures.core.ngrams.frequency import FrequencyTable
from nlpfeatures.core.ngrams.mutual_information import (
    UNDEFINED,
    Undefined,
    bigram_pmi,
    pointwise_mutual_information,
    score_ngrams,
)
from nlpfeatures.utils.exceptions import InvalidParameterError

TOKENS = ["dog", "played", "outside", "dog"]


# -------------------------------------
# N-gram windows
# -------------------------------------
def test_bigrams_scenario():
    assert bigrams(TOKENS) == [
        ("dog", "played"),
        ("played", "outside"),
        ("outside", "dog"),
    ]


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 7])
def test_ngram_count(n):
    assert len(ngrams(TOKENS, n)) == max(0, len(TOKENS) - n + 1)


def test_ngrams_align_with_token_positions():
    tokens = ["a", "b", "c", "d", "e"]
    for i, (first, second) in enumerate(ngrams(tokens, 2)):
        assert first == tokens[i]
        assert second == tokens[i + 1]


def test_unigrams_are_one_tuples():
    assert ngrams(["x", "y"], 1) == [("x",), ("y",)]


def test_short_input_yields_nothing():
    assert ngrams(["only"], 2) == []
    assert ngrams([], 1) == []


# -------------------------------------
# ❌ Invalid n
# -------------------------------------
@pytest.mark.parametrize("n", [0, -1, 2.0, "2", True])
def test_invalid_n(n):
    with pytest.raises(InvalidParameterError) as exc:
        ngrams(TOKENS, n)
    assert exc.value.code == "INVALID_PARAMETER"


# -------------------------------------
# Frequency tables
# -------------------------------------
def test_word_frequencies():
    table = word_frequencies(TOKENS)
    assert table["dog"] == 2
    assert table["cat"] == 0
    assert "cat" not in table
    assert table.total == 4
    assert len(table) == 3


def test_top_k_breaks_ties_by_first_seen():
    table = FrequencyTable(["b", "a", "c", "a", "b", "d"])
    assert table.most_common(3) == [("b", 2), ("a", 2), ("c", 1)]
    assert table.top(1) == [("b", 2)]


def test_frequency_filter_excludes_rare_bigram():
    tokens = ["new", "york", "is", "big"] * 3 + ["big", "apple"] * 6
    table = ngram_frequencies(tokens, 2)
    assert table[("new", "york")] == 3
    filtered = filter_by_frequency(table, 5)
    assert ("new", "york") not in filtered
    assert filtered[("big", "apple")] == 6
    # source table is untouched
    assert table[("new", "york")] == 3


def test_frequency_filter_threshold_is_inclusive():
    table = FrequencyTable(["a", "a", "b"])
    assert dict(filter_by_frequency(table, 2)) == {"a": 2}
    assert dict(filter_by_frequency(table, 0)) == {"a": 2, "b": 1}


def test_frequency_filter_rejects_negative_threshold():
    with pytest.raises(InvalidParameterError):
        filter_by_frequency(FrequencyTable(["a"]), -1)


def test_get_and_index_agree_on_missing_items():
    table = FrequencyTable(["a", "a"])
    assert table.get("a") == 2
    assert table.get("zzz") == 0
    assert table.get("zzz") == table["zzz"]
    assert table.get("zzz", -1) == -1


def test_table_has_no_mutators():
    table = FrequencyTable(["a"])
    with pytest.raises(TypeError):
        table["a"] = 5


# -------------------------------------
# Pointwise mutual information
# -------------------------------------
def test_bigram_pmi_formula():
    # N=8, c(w1)=2, c(w2)=2, c(w1,w2)=2 -> log2(8*2 / 4) = 2
    assert bigram_pmi(2, 2, 2, 8) == pytest.approx(2.0)


@pytest.mark.parametrize(
    "n_ii, n_ix, n_xi, n_xx",
    [(1, 1, 1, 10), (3, 5, 4, 100), (7, 20, 9, 5000)],
)
def test_bigram_pmi_agrees_with_nltk(n_ii, n_ix, n_xi, n_xx):
    expected = BigramAssocMeasures.pmi(n_ii, (n_ix, n_xi), n_xx)
    assert bigram_pmi(n_ii, n_ix, n_xi, n_xx) == pytest.approx(expected)


def test_trigram_pmi_generalizes():
    # joint 1 over N=10 against three unigrams seen once each
    score = pointwise_mutual_information(1, [1, 1, 1], 10)
    assert score == pytest.approx(math.log2(100))


@pytest.mark.parametrize(
    "joint, c1, c2, total",
    [(1, 0, 3, 10), (1, 3, 0, 10), (0, 3, 3, 10), (0, 0, 0, 0)],
)
def test_zero_counts_are_undefined(joint, c1, c2, total):
    score = bigram_pmi(joint, c1, c2, total)
    assert score is UNDEFINED
    assert isinstance(score, Undefined)
    assert not score


def test_negative_counts_rejected():
    with pytest.raises(InvalidParameterError):
        bigram_pmi(1, -2, 3, 10)


def test_score_ngrams_ranks_by_association():
    tokens = ["new", "york", "the", "city", "the", "new", "york", "the"]
    scored = score_ngrams(tokens, 2)
    grams = [g for g, _ in scored]
    assert grams[0] == ("new", "york")
    assert all(s is not UNDEFINED for _, s in scored)
    scores = [s for _, s in scored]
    assert scores == sorted(scores, reverse=True)


def test_score_ngrams_min_count():
    tokens = ["new", "york", "the", "city", "the", "new", "york", "the"]
    scored = score_ngrams(tokens, 2, min_count=2)
    assert [g for g, _ in scored] == [("new", "york"), ("york", "the")]
    # N=8: c(new)=2, c(york)=2, c(the)=3, c(new,york)=2, c(york,the)=2
    assert scored[0][1] == pytest.approx(2.0)
    assert scored[1][1] == pytest.approx(math.log2(16 / 6))
