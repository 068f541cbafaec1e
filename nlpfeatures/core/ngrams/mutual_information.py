"""Pointwise mutual information for n-grams.

For a bigram ``(w1, w2)`` in a corpus of ``N`` tokens::

    pmi = log2( (c(w1, w2) / N) / ((c(w1) / N) * (c(w2) / N)) )
        = log2( N * c(w1, w2) / (c(w1) * c(w2)) )

Longer n-grams are scored as the joint event against the product of their
unigram probabilities, ``log2(c(ngram) * N**(n-1) / prod(c(wi)))``. A zero
count anywhere makes the ratio meaningless, so the score is ``UNDEFINED``.
"""

from __future__ import annotations
import math
from enum import Enum
from typing import List, Sequence, Tuple, Union

from nlpfeatures.core.ngrams.builder import NGram, ngram_frequencies
from nlpfeatures.core.ngrams.frequency import FrequencyTable
from nlpfeatures.utils.exceptions import InvalidParameterError


class Undefined(Enum):
    UNDEFINED = "undefined"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED = Undefined.UNDEFINED

Score = Union[float, Undefined]


def pointwise_mutual_information(
    joint_count: int, unigram_counts: Sequence[int], total: int
) -> Score:
    for c in (joint_count, total, *unigram_counts):
        if c < 0:
            raise InvalidParameterError("counts must be >= 0")
    if not unigram_counts:
        raise InvalidParameterError("at least one unigram count is required")
    if joint_count == 0 or total == 0 or 0 in unigram_counts:
        return UNDEFINED

    # sum of logs keeps long n-grams away from float overflow
    n = len(unigram_counts)
    return (
        math.log2(joint_count)
        + (n - 1) * math.log2(total)
        - sum(math.log2(c) for c in unigram_counts)
    )


def bigram_pmi(
    bigram_count: int, count_w1: int, count_w2: int, total: int
) -> Score:
    return pointwise_mutual_information(bigram_count, (count_w1, count_w2), total)


def score_ngram(
    ngram: NGram,
    ngram_counts: FrequencyTable,
    word_counts: FrequencyTable,
    total: int,
) -> Score:
    return pointwise_mutual_information(
        ngram_counts[ngram], [word_counts[w] for w in ngram], total
    )


def score_ngrams(
    tokens: Sequence[str], n: int = 2, min_count: int = 1
) -> List[Tuple[NGram, Score]]:
    """Score every distinct n-gram in ``tokens`` seen at least ``min_count`` times.

    Highest score first; ties keep first-encountered order. Undefined scores
    cannot occur here since every counted n-gram and word occurs at least once.
    """
    word_counts = FrequencyTable(tokens)
    counts = ngram_frequencies(tokens, n).at_least(min_count)
    total = len(tokens)
    scored = [
        (gram, score_ngram(gram, counts, word_counts, total)) for gram in counts
    ]
    scored.sort(key=lambda item: item[1], reverse=True)
    return scored
