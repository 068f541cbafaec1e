from __future__ import annotations
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple, Union

from nlpfeatures.core.lemmatization.base import LemmaMap
from nlpfeatures.core.lemmatization.config import LemmatizationConfig
from nlpfeatures.core.resources import pos_tag, wordnet_lemmatizer
from nlpfeatures.utils.exceptions import InvalidParameterError

PosHint = Union[None, str, Sequence[Optional[str]]]

_WORDNET_POS = frozenset("nvars")


def to_wordnet_pos(tag: Optional[str]) -> Optional[str]:
    """Map a WordNet letter or a Penn Treebank tag to a WordNet POS letter.

    Unknown tags map to ``None`` (no hint).
    """
    if not tag:
        return None
    if len(tag) == 1 and tag.lower() in _WORDNET_POS:
        return tag.lower()
    # Penn tag -> WordNet POS
    if tag.startswith("J"):
        return "a"  # ADJ
    if tag.startswith("V"):
        return "v"  # VERB
    if tag.startswith("N"):
        return "n"  # NOUN
    if tag.startswith("R"):
        return "r"  # ADV
    return None


class StaticLemmaMap(LemmaMap):
    """Lemma lookup backed by an in-memory table.

    Keys are either a bare token or a ``(token, pos)`` pair. A POS-specific
    entry wins over the bare one; a miss returns the token unchanged.
    """

    def __init__(self, entries: Mapping[Union[str, Tuple[str, str]], str]):
        table = {}
        for key, lemma in entries.items():
            if isinstance(key, tuple):
                token, pos = key
                table[(token, to_wordnet_pos(pos))] = lemma
            else:
                table[(key, None)] = lemma
        self._table = MappingProxyType(table)

    def __len__(self) -> int:
        return len(self._table)

    def lookup(self, token: str, pos: Optional[str] = None) -> str:
        pos = to_wordnet_pos(pos)
        if pos is not None and (token, pos) in self._table:
            return self._table[(token, pos)]
        return self._table.get((token, None), token)


class WordNetLemmaMap(LemmaMap):
    """Lemma lookup through NLTK's WordNetLemmatizer (noun when no POS)."""

    def lookup(self, token: str, pos: Optional[str] = None) -> str:
        wn = wordnet_lemmatizer()
        return wn.lemmatize(token, to_wordnet_pos(pos) or "n")


def _resolve_pos(tokens: List[str], pos: PosHint) -> List[Optional[str]]:
    if pos is None:
        return [None] * len(tokens)
    if pos == "auto":
        return [tag for _, tag in pos_tag(tokens)]
    if isinstance(pos, str):
        return [pos] * len(tokens)
    tags = list(pos)
    if len(tags) != len(tokens):
        raise InvalidParameterError(
            f"Got {len(tags)} POS tags for {len(tokens)} tokens"
        )
    return tags


def lemmatize_tokens(
    tokens: Sequence[str],
    lemma_map: Optional[LemmaMap] = None,
    pos: PosHint = None,
    config: LemmatizationConfig | None = None,
) -> List[str]:
    """Map each token to its lemma; tokens without an entry pass through.

    ``pos`` is one tag for every token, one tag per token, or ``"auto"`` to
    tag with ``nltk.pos_tag``.
    """
    cfg = config or LemmatizationConfig()
    if lemma_map is None:
        lemma_map = WordNetLemmaMap()

    toks = [t.lower() for t in tokens] if cfg.lowercase else list(tokens)
    if pos is None and cfg.use_pos_tagging:
        pos = "auto"
    tags = _resolve_pos(toks, pos)
    return [lemma_map.lookup(t, tag) for t, tag in zip(toks, tags)]
