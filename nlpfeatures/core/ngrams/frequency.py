from __future__ import annotations
from collections import Counter
from collections.abc import Mapping
from typing import Hashable, Iterable, Iterator, List, Optional, Tuple

from nlpfeatures.utils.exceptions import InvalidParameterError


class FrequencyTable(Mapping):
    """Immutable item -> count table built once from a finite sequence.

    Missing items read as ``0`` through both ``table[key]`` and ``get``.
    Iteration, ``most_common`` ties and ``at_least`` all keep
    first-encountered order.
    """

    __slots__ = ("_counts",)

    def __init__(self, items: Iterable[Hashable] = ()):
        self._counts = Counter(items)

    @classmethod
    def from_counts(cls, counts: Iterable[Tuple[Hashable, int]]) -> "FrequencyTable":
        table = cls()
        for key, count in counts:
            if count < 0:
                raise InvalidParameterError(f"Negative count for {key!r}")
            table._counts[key] = count
        return table

    def __getitem__(self, key) -> int:
        return self._counts.get(key, 0)

    def __contains__(self, key) -> bool:
        return key in self._counts

    def get(self, key, default=0):
        return self._counts.get(key, default)

    def __iter__(self) -> Iterator:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"FrequencyTable({dict(self._counts)!r})"

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    def most_common(self, k: Optional[int] = None) -> List[Tuple[Hashable, int]]:
        """Top ``k`` entries by descending count (all when ``k`` is None)."""
        if k is not None and k < 0:
            raise InvalidParameterError("k must be >= 0")
        # Counter.most_common sorts stably, so ties stay in insertion order
        return self._counts.most_common(k)

    top = most_common

    def at_least(self, min_count: int) -> "FrequencyTable":
        if min_count < 0:
            raise InvalidParameterError("min_count must be >= 0")
        return FrequencyTable.from_counts(
            (key, c) for key, c in self._counts.items() if c >= min_count
        )
