from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

from nltk.stem import PorterStemmer
from nltk.stem.snowball import SnowballStemmer

from nlpfeatures.core.stemming.base import Stemmer
from nlpfeatures.core.stemming.config import StemmingConfig
from nlpfeatures.utils.exceptions import InvalidParameterError

VOWELS = frozenset("aeiouy")

# Checked in order; the first suffix that matches and passes the guards wins.
SUFFIX_RULES: Tuple[str, ...] = ("ing", "ed", "s")

# Endings that look like a plural "s" but are not stripped.
KEEP_S_ENDINGS: Tuple[str, ...] = ("ss", "us", "is")

MIN_STEM_LEN = 3


class SuffixStemmer(Stemmer):
    """Crude, deterministic suffix stripper.

    Rules, applied longest suffix first:

    * ``ing``, ``ed`` and ``s`` are stripped when the remaining stem has at
      least three characters and contains a vowel (``y`` counts).
    * words ending in ``ss``, ``us`` or ``is`` keep their final ``s``.
    * after ``ing``/``ed`` a doubled final consonant is undoubled
      (``running`` -> ``run``) unless it is ``l``, ``s`` or ``z`` or the
      result would be shorter than three characters.

    Rules are re-applied until none matches, so ``stem(stem(w)) == stem(w)``.
    The output is lowercase. Irregular forms are left alone (``ran``) and
    some stems are not words (``agreed`` -> ``agre``).
    """

    def _strip_once(self, word: str) -> Optional[str]:
        for suffix in SUFFIX_RULES:
            if not word.endswith(suffix):
                continue
            if suffix == "s" and word.endswith(KEEP_S_ENDINGS):
                return None
            stem = word[: -len(suffix)]
            if len(stem) < MIN_STEM_LEN or not VOWELS.intersection(stem):
                return None
            if suffix != "s":
                stem = self._undouble(stem)
            return stem
        return None

    @staticmethod
    def _undouble(stem: str) -> str:
        if (
            len(stem) > MIN_STEM_LEN
            and stem[-1] == stem[-2]
            and stem[-1] not in VOWELS
            and stem[-1] not in "lsz"
        ):
            return stem[:-1]
        return stem

    def stem(self, word: str) -> str:
        current = word.lower()
        while True:
            stripped = self._strip_once(current)
            if stripped is None:
                return current
            current = stripped


class NltkStemmer(Stemmer):
    """Wraps an NLTK stemmer and drives it to a fixed point.

    Porter and Snowball do not promise that stemming a stem is a no-op, so
    the wrapped stemmer is re-applied until the output stops changing or
    ``max_passes`` is reached.
    """

    def __init__(self, wrapped, max_passes: int = 8):
        self._wrapped = wrapped
        self.max_passes = max_passes

    def stem(self, word: str) -> str:
        current = word.lower()
        for _ in range(self.max_passes):
            nxt = self._wrapped.stem(current)
            if nxt == current:
                break
            current = nxt
        return current


def get_stemmer(config: StemmingConfig | None = None) -> Stemmer:
    cfg = config or StemmingConfig()
    if cfg.max_passes < 1:
        raise InvalidParameterError("max_passes must be >= 1")
    if cfg.algorithm == "suffix":
        return SuffixStemmer()
    if cfg.algorithm == "porter":
        return NltkStemmer(PorterStemmer(), cfg.max_passes)
    if cfg.algorithm == "snowball":
        try:
            snowball = SnowballStemmer(cfg.language)
        except ValueError as e:
            raise InvalidParameterError(str(e)) from e
        return NltkStemmer(snowball, cfg.max_passes)
    raise InvalidParameterError(f"Unknown stemming algorithm '{cfg.algorithm}'")


def stem_tokens(
    tokens: Sequence[str], stemmer: Optional[Stemmer] = None
) -> List[str]:
    stemmer = stemmer or SuffixStemmer()
    return [stemmer.stem(t) for t in tokens]
