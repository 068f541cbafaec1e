"""Read-only NLTK reference data.

Stop-word lists and the WordNet lemmatizer are loaded lazily, once per
process, and treated as immutable afterwards. A missing corpus surfaces as
:class:`ResourceNotFoundError` instead of NLTK's bare ``LookupError``.
"""

from __future__ import annotations
import logging
from functools import lru_cache
from typing import FrozenSet

import nltk
from nltk.corpus import stopwords as nltk_stopwords
from nltk.stem import WordNetLemmatizer

from nlpfeatures.core.config import settings
from nlpfeatures.utils.exceptions import ResourceNotFoundError

logger = logging.getLogger(__name__)


def _ensure_data_path() -> None:
    extra = settings.NLTK_DATA_DIR
    if extra and extra not in nltk.data.path:
        nltk.data.path.append(extra)
        logger.info(f"NLTK data path extended with {extra}")


@lru_cache(maxsize=None)
def nltk_stopwords_for(language: str) -> FrozenSet[str]:
    _ensure_data_path()
    try:
        words = nltk_stopwords.words(language)
    except LookupError as e:
        raise ResourceNotFoundError("stopwords") from e
    except OSError as e:
        # corpus present but no file for this language
        raise ResourceNotFoundError(
            "stopwords", f"No stopword list for language '{language}'"
        ) from e
    logger.info(f"Loaded {len(words)} NLTK stopwords for '{language}'")
    return frozenset(w.lower() for w in words)


@lru_cache(maxsize=1)
def wordnet_lemmatizer() -> WordNetLemmatizer:
    _ensure_data_path()
    wn = WordNetLemmatizer()
    try:
        # force the lazy corpus loader so a missing download fails here
        wn.lemmatize("tests")
    except LookupError as e:
        raise ResourceNotFoundError("wordnet") from e
    logger.info("WordNet lemmatizer ready")
    return wn


def pos_tag(tokens):
    _ensure_data_path()
    try:
        return nltk.pos_tag(list(tokens))
    except LookupError as e:
        raise ResourceNotFoundError("averaged_perceptron_tagger_eng") from e
