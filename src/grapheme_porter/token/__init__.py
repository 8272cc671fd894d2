# grapheme_porter/token/__init__.py
"""
token.
=====

Does: Sentence-level helpers around the word stemmer: spaCy tokenization and settings.
Exports: tokenize, stem_token, stem_tokens, stem_text, get_stems_and_counts,
         StemmerSettings, load_settings
Used by: The demo CLI and callers stemming running text.
"""

from __future__ import annotations

from .settings import StemmerSettings, load_settings
from .stem_text import (
    get_stems_and_counts,
    stem_text,
    stem_token,
    stem_tokens,
    tokenize,
)

__all__ = [
    # settings
    "StemmerSettings",
    "load_settings",
    # text
    "tokenize",
    "stem_token",
    "stem_tokens",
    "stem_text",
    "get_stems_and_counts",
]
