from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class LemmatizationConfig:
    use_pos_tagging: bool = False  # tag tokens with nltk.pos_tag, then look up by POS
    lowercase: bool = False  # lowercase tokens before lookup (usually already done)
