# nlpfeatures/core/config.py

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    ENV: str = "local"
    LOG_LEVEL: str = "INFO"

    STOPWORD_LANGUAGE: str = "english"
    NORMALIZATION_STRATEGY: Literal["stem", "lemma"] = "stem"
    STEMMER_ALGORITHM: Literal["suffix", "porter", "snowball"] = "suffix"

    NGRAM_SIZE: int = Field(default=2, ge=1)
    NGRAM_MIN_COUNT: int = Field(default=1, ge=0)
    TOP_K: int = Field(default=20, ge=1)

    NLTK_DATA_DIR: str | None = None  # extra search path for NLTK corpora

    model_config = SettingsConfigDict(
        env_file=None,
        env_file_encoding="utf-8",
    )


settings = Settings()
