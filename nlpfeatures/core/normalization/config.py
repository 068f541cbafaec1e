from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from nlpfeatures.core.lemmatization.config import LemmatizationConfig
from nlpfeatures.core.stemming.config import StemmingConfig


class NormalizationStrategy(str, Enum):
    STEM = "stem"
    LEMMA = "lemma"


@dataclass(frozen=True)
class NormalizationConfig:
    strategy: NormalizationStrategy = NormalizationStrategy.STEM
    stemming: StemmingConfig = field(default_factory=StemmingConfig)
    lemmatization: LemmatizationConfig = field(default_factory=LemmatizationConfig)
