# src/grapheme_porter/stemmer/phonology.py
from __future__ import annotations

"""
stemmer.phonology

Does: Classify a cluster of a word as consonant or vowel, Porter style.
      "a e i o u" are vowels; "y" is a vowel only when the cluster before it is a consonant.
Used by: measure, conditions, and (through them) every rule guard.

The answer for "y" depends on its left neighbour, so it is always computed against the
word as it is now; a suffix removed by an earlier step can change it.
"""

from typing import Sequence

__all__ = ["VOWELS", "is_consonant", "is_vowel"]

VOWELS = frozenset({"a", "e", "i", "o", "u"})


def is_consonant(word: Sequence[str], i: int) -> bool:
    """Does: True if word[i] acts as a consonant in its current context. Returns: bool."""
    cluster = word[i]
    if cluster in VOWELS:
        return False
    if cluster != "y":
        return True

    # Walk back to the first "y" of the run; classes alternate from there.
    start = i
    while start > 0 and word[start - 1] == "y":
        start -= 1
    first_is_consonant = start == 0 or word[start - 1] in VOWELS
    return first_is_consonant == ((i - start) % 2 == 0)


def is_vowel(word: Sequence[str], i: int) -> bool:
    return not is_consonant(word, i)
