from __future__ import annotations
from typing import List, Sequence, Tuple

from nltk.util import ngrams as nltk_ngrams

from nlpfeatures.core.ngrams.frequency import FrequencyTable
from nlpfeatures.utils.exceptions import InvalidParameterError

NGram = Tuple[str, ...]


def _check_n(n) -> None:
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise InvalidParameterError(f"n must be an integer >= 1, got {n!r}")


def ngrams(tokens: Sequence[str], n: int) -> List[NGram]:
    """Overlapping n-token windows, stride 1, in order of appearance.

    Fewer than ``n`` tokens gives an empty list.
    """
    _check_n(n)
    return list(nltk_ngrams(tokens, n))


def bigrams(tokens: Sequence[str]) -> List[NGram]:
    return ngrams(tokens, 2)


def word_frequencies(tokens: Sequence[str]) -> FrequencyTable:
    return FrequencyTable(tokens)


def ngram_frequencies(tokens: Sequence[str], n: int) -> FrequencyTable:
    return FrequencyTable(ngrams(tokens, n))


def filter_by_frequency(table: FrequencyTable, min_count: int) -> FrequencyTable:
    """Keep entries seen at least ``min_count`` times."""
    return table.at_least(min_count)
