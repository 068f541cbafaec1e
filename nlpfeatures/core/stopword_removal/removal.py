from __future__ import annotations
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple

from nlpfeatures.core.resources import nltk_stopwords_for
from nlpfeatures.core.stopword_removal.base import StopwordRemover
from nlpfeatures.core.stopword_removal.config import StopwordConfig

NEGATIONS = frozenset({"no", "not", "never"})


def is_punctuation(token: str) -> bool:
    """True for tokens made only of punctuation or symbols."""
    return not any(ch.isalnum() for ch in token)


def build_stopword_set(
    config: StopwordConfig | None = None, base: Optional[Iterable[str]] = None
) -> FrozenSet[str]:
    """Build the lowercase stopword set for ``config``.

    ``base`` replaces the NLTK list for ``config.language`` when given.
    """
    cfg = config or StopwordConfig()
    words = set(nltk_stopwords_for(cfg.language) if base is None else base)
    words |= set(cfg.custom_stopwords)
    words -= set(cfg.exclude_stopwords)
    stopset = {w.lower() for w in words}
    if cfg.preserve_negations:
        stopset -= NEGATIONS
    return frozenset(stopset)


def load_stopwords(language: str = "english") -> FrozenSet[str]:
    return nltk_stopwords_for(language)


class DefaultStopwordRemover(StopwordRemover):
    def __init__(
        self,
        config: StopwordConfig | None = None,
        stopwords: Optional[Iterable[str]] = None,
    ):
        self.cfg = config or StopwordConfig()
        self._stopset = build_stopword_set(self.cfg, stopwords)

    @property
    def stopwords(self) -> FrozenSet[str]:
        return self._stopset

    def remove(self, tokens: Sequence[str]) -> Tuple[List[str], List[str]]:
        cleaned: List[str] = []
        removed: List[str] = []
        for t in tokens:
            norm = t.lower()
            if norm in self._stopset or (
                self.cfg.drop_punctuation and is_punctuation(norm)
            ):
                removed.append(t)
                continue
            cleaned.append(norm)
        return cleaned, removed


def filter_stopwords(tokens: Sequence[str], stopwords: Iterable[str]) -> List[str]:
    """Lowercase ``tokens`` and drop stopwords and punctuation-only tokens.

    Order of the survivors is preserved and the operation is idempotent.
    """
    cleaned, _ = DefaultStopwordRemover(stopwords=stopwords).remove(tokens)
    return cleaned
