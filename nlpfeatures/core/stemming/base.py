from __future__ import annotations
from abc import ABC, abstractmethod


class Stemmer(ABC):
    """Port: reduce a single word to its stem."""

    @abstractmethod
    def stem(self, word: str) -> str: ...
