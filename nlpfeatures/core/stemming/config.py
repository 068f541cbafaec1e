from __future__ import annotations
from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class StemmingConfig:
    algorithm: Literal["suffix", "porter", "snowball"] = "suffix"
    language: str = "english"  # snowball only
    max_passes: int = 8  # cap for nltk algorithms driven to a fixed point
