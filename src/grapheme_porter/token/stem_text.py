# src/grapheme_porter/token/stem_text.py
# ──────────────────────────────────────────────────────────────
# Running text → stems, one word at a time
# ──────────────────────────────────────────────────────────────
"""
stem_text.

Does: Tokenize running text with spaCy's blank English tokenizer, then stem each word
      with the core Porter stemmer (optional lowercasing, protected words).
Returns: tokenize(), stem_token(), stem_tokens(), stem_text(), get_stems_and_counts().
Used by: The demo CLI and callers that have sentences rather than single words.
"""

from __future__ import annotations

from collections import Counter
from functools import lru_cache
from typing import Iterable

import spacy
from spacy.language import Language

from grapheme_porter.stemmer import stem
from grapheme_porter.token.settings import StemmerSettings, load_settings
from grapheme_porter.utils.log import debug as debug_log

__all__ = [
    "tokenize",
    "stem_token",
    "stem_tokens",
    "stem_text",
    "get_stems_and_counts",
]


@lru_cache(maxsize=1)
def _get_nlp() -> Language:
    """Does: Build the tokenizer-only English pipeline once. Returns: spaCy Language."""
    return spacy.blank("en")


def _has_letter(text: str) -> bool:
    return any(ch.isalpha() for ch in text)


# ──────────────────────────────────────────────────────────────
# 1) TOKENIZATION
# ──────────────────────────────────────────────────────────────


def tokenize(text: str, settings: StemmerSettings | None = None) -> list[str]:
    """
    Does: Split `text` into word tokens; whitespace always dropped, letterless tokens
          dropped unless settings.keep_punctuation.
    Returns: list of token strings (original casing).
    """
    if not isinstance(text, str):
        return []
    settings = settings or load_settings()
    doc = _get_nlp().make_doc(text)
    return [
        tok.text
        for tok in doc
        if not tok.is_space and (settings.keep_punctuation or _has_letter(tok.text))
    ]


# ──────────────────────────────────────────────────────────────
# 2) STEMMING
# ──────────────────────────────────────────────────────────────


def stem_token(token: str, settings: StemmerSettings, debug: bool = False) -> str:
    """Does: Lowercase (if configured), keep protected/letterless tokens, else stem. Returns: str."""
    word = token.lower() if settings.lowercase else token
    if word in settings.protected_words or not _has_letter(word):
        debug_log(f"keep {word!r}", topic="token")
        return word
    out = stem(word, debug=debug)
    debug_log(f"{token!r} → {out!r}", topic="token")
    return out


def stem_tokens(
    tokens: Iterable[str],
    *,
    settings: StemmerSettings | None = None,
    debug: bool = False,
) -> list[str]:
    """Does: Stem every token independently. Returns: list of stems, same order."""
    settings = settings or load_settings()
    return [stem_token(t, settings, debug=debug) for t in tokens if isinstance(t, str)]


def stem_text(
    text: str,
    *,
    settings: StemmerSettings | None = None,
    debug: bool = False,
) -> str:
    """Does: Tokenize and stem `text`. Returns: stems joined by single spaces."""
    if not isinstance(text, str):
        return ""
    settings = settings or load_settings()
    return " ".join(stem_tokens(tokenize(text, settings), settings=settings, debug=debug))


# ──────────────────────────────────────────────────────────────
# 3) ANALYSIS
# ──────────────────────────────────────────────────────────────


def get_stems_and_counts(
    text: str,
    *,
    settings: StemmerSettings | None = None,
) -> dict[str, int]:
    """Does: Count how often each stem occurs in `text`. Returns: Dict[stem → count]."""
    if not isinstance(text, str):
        return {}
    settings = settings or load_settings()
    return dict(Counter(stem_tokens(tokenize(text, settings), settings=settings)))
