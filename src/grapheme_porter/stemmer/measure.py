# src/grapheme_porter/stemmer/measure.py
from __future__ import annotations

"""
stemmer.measure

Does: Compute Porter's measure `m` of a word or word part.

Any word can be written [C](VC)^m[V], where C is a run of consonants and V a run of
vowels; `m` is the exponent. For example:

    m=0    tree, by, tr, ee
    m=1    trouble, oats, trees, ivy
    m=2    troubles, private, oaten, orrery

Used by: rule guards in every step except 1a.
"""

from itertools import groupby
from typing import Sequence

from grapheme_porter.stemmer.phonology import is_consonant

__all__ = ["cv_pattern", "measure"]


def cv_pattern(word: Sequence[str]) -> str:
    """Does: Collapse the word into its run-length pattern, e.g. 'trouble' → 'CVCV'. Returns: str."""
    tags = ("C" if is_consonant(word, i) else "V" for i in range(len(word)))
    return "".join(tag for tag, _ in groupby(tags))


def measure(word: Sequence[str]) -> int:
    """Does: Count vowel runs immediately followed by a consonant run. Returns: int (0 for empty)."""
    return cv_pattern(word).count("VC")
