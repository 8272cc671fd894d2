# src/grapheme_porter/token/settings.py
"""
settings.

Does: Load the text-helper settings from <data>/stemmer.json and <data>/protected_words.json.
Returns: StemmerSettings (frozen); defaults when a file or the data dir is missing.
Used by: token.stem_text and the demo CLI.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from grapheme_porter.utils.load_config import ConfigTypeError, load_config
from grapheme_porter.utils.log import debug as debug_log

__all__ = ["StemmerSettings", "load_settings", "validate_settings"]

log = logging.getLogger(__name__)

_BOOL_KEYS = ("lowercase", "keep_punctuation")


@dataclass(frozen=True)
class StemmerSettings:
    """Knobs for the text helpers; the core `stem()` never reads them.

    Attributes:
        lowercase: lowercase every token before stemming.
        keep_punctuation: keep tokens without any letter (punctuation, digits).
        protected_words: tokens returned as-is (after lowercasing) instead of stemmed.
    """

    lowercase: bool = True
    keep_punctuation: bool = False
    protected_words: frozenset[str] = field(default_factory=frozenset)


def validate_settings(data: dict[str, Any]) -> dict[str, Any]:
    """Does: Reject unknown keys and non-bool flags. Returns: a clean copy."""
    unknown = sorted(set(data) - set(_BOOL_KEYS))
    if unknown:
        raise ConfigTypeError(f"unknown setting(s): {', '.join(unknown)}")
    for key in _BOOL_KEYS:
        if key in data and not isinstance(data[key], bool):
            raise ConfigTypeError(f"{key!r} must be a boolean, got {type(data[key]).__name__}")
    return dict(data)


def load_settings(base_dir: Path | None = None) -> StemmerSettings:
    """Does: Build StemmerSettings from the data dir, falling back to defaults per missing file."""
    try:
        flags = load_config(
            "stemmer", mode="validated_dict", base_dir=base_dir, validator=validate_settings
        )
    except FileNotFoundError as e:
        log.debug("No stemmer.json, using defaults (%s)", e)
        flags = {}

    try:
        protected = load_config("protected_words", mode="set", base_dir=base_dir)
    except FileNotFoundError as e:
        log.debug("No protected_words.json, protecting nothing (%s)", e)
        protected = frozenset()

    settings = StemmerSettings(**flags, protected_words=frozenset(w.lower() for w in protected))
    debug_log(
        f"lowercase={settings.lowercase} keep_punctuation={settings.keep_punctuation} "
        f"protected={len(settings.protected_words)}",
        topic="settings",
    )
    return settings
