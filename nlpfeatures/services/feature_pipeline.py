from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from nlpfeatures.core.config import Settings, settings as default_settings
from nlpfeatures.core.lemmatization.base import LemmaMap
from nlpfeatures.core.ngrams.builder import NGram, ngrams
from nlpfeatures.core.ngrams.frequency import FrequencyTable
from nlpfeatures.core.ngrams.mutual_information import Score, score_ngrams
from nlpfeatures.core.normalization.config import (
    NormalizationConfig,
    NormalizationStrategy,
)
from nlpfeatures.core.normalization.normalizer import normalize
from nlpfeatures.core.stemming.config import StemmingConfig
from nlpfeatures.core.stemming.stemmer import get_stemmer
from nlpfeatures.core.stopword_removal.config import StopwordConfig
from nlpfeatures.core.stopword_removal.removal import DefaultStopwordRemover
from nlpfeatures.core.tokenization.config import TokenizationConfig
from nlpfeatures.core.tokenization.tokenizer import DefaultTokenizer
from nlpfeatures.utils.exceptions import InvalidParameterError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineConfig:
    tokenization: TokenizationConfig = field(default_factory=TokenizationConfig)
    stopwords: StopwordConfig = field(default_factory=StopwordConfig)
    normalization: NormalizationConfig = field(default_factory=NormalizationConfig)
    n: int = 2
    min_count: int = 1
    top_k: int = 20

    @classmethod
    def from_settings(cls, s: Settings | None = None) -> "PipelineConfig":
        s = s or default_settings
        return cls(
            stopwords=StopwordConfig(language=s.STOPWORD_LANGUAGE),
            normalization=NormalizationConfig(
                strategy=NormalizationStrategy(s.NORMALIZATION_STRATEGY),
                stemming=StemmingConfig(algorithm=s.STEMMER_ALGORITHM),
            ),
            n=s.NGRAM_SIZE,
            min_count=s.NGRAM_MIN_COUNT,
            top_k=s.TOP_K,
        )


@dataclass(frozen=True)
class FeatureResult:
    tokens: List[str]
    filtered: List[str]
    removed: List[str]
    normalized: List[str]
    ngrams: List[NGram]
    word_counts: FrequencyTable
    ngram_counts: FrequencyTable  # already filtered by min_count
    pmi: List[Tuple[NGram, Score]]
    top_words: List[Tuple[str, int]]
    top_ngrams: List[Tuple[NGram, int]]


class FeaturePipeline:
    """
    Runs text through tokenize -> stopword filter -> normalize -> n-grams.
    - Stages are built once from config; no state is kept between runs
    - Each run returns a fresh FeatureResult snapshot
    """

    def __init__(
        self,
        config: PipelineConfig | None = None,
        *,
        stopwords: Optional[Iterable[str]] = None,
        lemma_map: Optional[LemmaMap] = None,
    ):
        self.cfg = config or PipelineConfig()
        if self.cfg.n < 1:
            raise InvalidParameterError("n must be >= 1")
        if self.cfg.min_count < 0:
            raise InvalidParameterError("min_count must be >= 0")
        if self.cfg.top_k < 1:
            raise InvalidParameterError("top_k must be >= 1")

        self.tokenizer = DefaultTokenizer(self.cfg.tokenization)
        self.remover = DefaultStopwordRemover(self.cfg.stopwords, stopwords)
        self.lemma_map = lemma_map
        norm = self.cfg.normalization
        self.stemmer = (
            get_stemmer(norm.stemming)
            if norm.strategy == NormalizationStrategy.STEM
            else None
        )

    def run(self, text: str, *, pos: Optional[str] = None) -> FeatureResult:
        """Run every stage over ``text``.

        ``pos`` is a single tag applied to every surviving token, or ``"auto"``
        to tag them with ``nltk.pos_tag``. Per-token tags are not accepted here
        because the token list is only known after stopword filtering; call
        ``normalize`` directly for that.
        """
        if pos is not None and not isinstance(pos, str):
            raise InvalidParameterError(
                "pos must be a single tag or \"auto\" at the pipeline level"
            )
        tokens = self.tokenizer.tokenize(text)
        filtered, removed = self.remover.remove(tokens)
        normalized = normalize(
            filtered,
            self.cfg.normalization.strategy,
            lemma_map=self.lemma_map,
            pos=pos,
            stemmer=self.stemmer,
            config=self.cfg.normalization,
        )
        grams = ngrams(normalized, self.cfg.n)
        word_counts = FrequencyTable(normalized)
        ngram_counts = FrequencyTable(grams).at_least(self.cfg.min_count)
        pmi = (
            score_ngrams(normalized, self.cfg.n, self.cfg.min_count)
            if self.cfg.n > 1
            else []
        )

        logger.info(
            f"Pipeline run: {len(tokens)} tokens, {len(removed)} removed, "
            f"{len(grams)} {self.cfg.n}-grams, {len(ngram_counts)} kept "
            f"(min_count={self.cfg.min_count})"
        )

        return FeatureResult(
            tokens=tokens,
            filtered=filtered,
            removed=removed,
            normalized=normalized,
            ngrams=grams,
            word_counts=word_counts,
            ngram_counts=ngram_counts,
            pmi=pmi,
            top_words=word_counts.most_common(self.cfg.top_k),
            top_ngrams=ngram_counts.most_common(self.cfg.top_k),
        )

    def run_many(
        self, texts: Iterable[str], *, pos: Optional[str] = None
    ) -> List[FeatureResult]:
        return [self.run(t, pos=pos) for t in texts]
