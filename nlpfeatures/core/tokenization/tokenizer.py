from __future__ import annotations
from typing import List

from nltk.tokenize import RegexpTokenizer, wordpunct_tokenize

from nlpfeatures.core.tokenization.base import Tokenizer
from nlpfeatures.core.tokenization.config import TokenizationConfig
from nlpfeatures.utils.exceptions import InvalidInputError, InvalidParameterError

_METHODS = ("wordpunct", "regex")


class DefaultTokenizer(Tokenizer):
    """Adapter: tokenizes with NLTK wordpunct (or a regex) plus optional filters.

    ``wordpunct`` treats each contiguous alphanumeric run as a token and each
    contiguous punctuation run as its own token; whitespace only separates.
    """

    def __init__(self, config: TokenizationConfig | None = None):
        self.cfg = config or TokenizationConfig()
        if self.cfg.method not in _METHODS:
            raise InvalidParameterError(
                f"Unknown tokenization method '{self.cfg.method}'"
            )
        if self.cfg.min_token_len < 1:
            raise InvalidParameterError("min_token_len must be >= 1")
        self._regex = RegexpTokenizer(self.cfg.regex_pattern or r"\w+")

    def _tokenize_raw(self, text: str) -> List[str]:
        if self.cfg.method == "regex":
            return self._regex.tokenize(text)
        return wordpunct_tokenize(text)

    def tokenize(self, text: str) -> List[str]:
        if not isinstance(text, str):
            raise InvalidInputError(
                f"Expected text, got {type(text).__name__}"
            )
        out: List[str] = []
        for t in self._tokenize_raw(text):
            if not t:
                continue
            if self.cfg.lowercase:
                t = t.lower()
            if self.cfg.keep_alnum_only and not t.isalnum():
                continue
            if self.cfg.remove_numbers_only and t.isdigit():
                continue
            if len(t) < self.cfg.min_token_len:
                continue
            out.append(t)
        return out


def tokenize(text: str, config: TokenizationConfig | None = None) -> List[str]:
    """Split ``text`` into tokens. Empty or blank text yields ``[]``."""
    return DefaultTokenizer(config).tokenize(text)
