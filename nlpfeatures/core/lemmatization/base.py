from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional


class LemmaMap(ABC):
    """Port: read-only (token, optional POS) -> lemma lookup.

    Implementations return the token unchanged when they know no lemma for
    it; they never raise for unknown tokens.
    """

    @abstractmethod
    def lookup(self, token: str, pos: Optional[str] = None) -> str: ...
