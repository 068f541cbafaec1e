from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet


@dataclass(frozen=True)
class StopwordConfig:
    language: str = "english"
    custom_stopwords: FrozenSet[str] = field(
        default_factory=frozenset
    )  # extra words to remove
    exclude_stopwords: FrozenSet[str] = field(
        default_factory=frozenset
    )  # words to keep even if in list
    preserve_negations: bool = False  # keep {no, not, never}
    drop_punctuation: bool = True  # drop tokens with no alphanumeric char
