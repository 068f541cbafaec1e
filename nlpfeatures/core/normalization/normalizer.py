from __future__ import annotations
from typing import Callable, Dict, List, Optional, Sequence

from nlpfeatures.core.lemmatization.base import LemmaMap
from nlpfeatures.core.lemmatization.lemmatizer import PosHint, lemmatize_tokens
from nlpfeatures.core.normalization.config import (
    NormalizationConfig,
    NormalizationStrategy,
)
from nlpfeatures.core.stemming.base import Stemmer
from nlpfeatures.core.stemming.stemmer import get_stemmer
from nlpfeatures.utils.exceptions import InvalidParameterError


def _by_stem(tokens, *, cfg, stemmer, lemma_map, pos):
    stemmer = stemmer or get_stemmer(cfg.stemming)
    return [stemmer.stem(t) for t in tokens]


def _by_lemma(tokens, *, cfg, stemmer, lemma_map, pos):
    return lemmatize_tokens(tokens, lemma_map, pos, cfg.lemmatization)


_STRATEGIES: Dict[NormalizationStrategy, Callable[..., List[str]]] = {
    NormalizationStrategy.STEM: _by_stem,
    NormalizationStrategy.LEMMA: _by_lemma,
}


def normalize(
    tokens: Sequence[str],
    strategy: NormalizationStrategy | str = NormalizationStrategy.STEM,
    *,
    lemma_map: Optional[LemmaMap] = None,
    pos: PosHint = None,
    stemmer: Optional[Stemmer] = None,
    config: NormalizationConfig | None = None,
) -> List[str]:
    """Reduce every token to a root form; output has the input's length and order.

    ``strategy`` picks stemming or lemmatization. ``stemmer`` only applies to
    the stem strategy; ``lemma_map`` and ``pos`` only to the lemma strategy.
    """
    try:
        strategy = NormalizationStrategy(strategy)
    except ValueError as e:
        raise InvalidParameterError(
            f"Unknown normalization strategy '{strategy}'"
        ) from e
    cfg = config or NormalizationConfig(strategy=strategy)
    return _STRATEGIES[strategy](
        list(tokens), cfg=cfg, stemmer=stemmer, lemma_map=lemma_map, pos=pos
    )
