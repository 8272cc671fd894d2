# src/grapheme_porter/stemmer/graphemes.py
from __future__ import annotations

"""
stemmer.graphemes

Does: Split text into extended grapheme clusters (user-perceived characters) and join them back.
Returns: graphemes() → tuple[str, ...], join_graphemes() → str.
Used by: Every stemmer stage; positions always address clusters, never code points.
"""

from typing import Iterable, Tuple

import regex

__all__ = ["Graphemes", "graphemes", "join_graphemes"]

Graphemes = Tuple[str, ...]

# \X = one extended grapheme cluster (base + combining marks, emoji ZWJ sequences, Hangul syllables)
_CLUSTER_RE = regex.compile(r"\X")


def graphemes(text: str) -> Graphemes:
    """Does: Segment `text` into grapheme clusters, in order. No normalization, no case folding."""
    return tuple(_CLUSTER_RE.findall(text))


def join_graphemes(word: Iterable[str]) -> str:
    """Does: Concatenate clusters back into a string with no separator."""
    return "".join(word)
