# src/grapheme_porter/stemmer/conditions.py
from __future__ import annotations

"""
stemmer.conditions

Does: Boolean tests over a word (or the stem left once a suffix is removed) used as rule guards:
      *d (double consonant), *o (consonant-vowel-consonant), *v* (contains a vowel),
      plus small guard factories built on `measure`.
Returns: Pure predicates; no mutation, no I/O.
Used by: stemmer.rules tables.
"""

from typing import Callable, Sequence

from grapheme_porter.stemmer.measure import measure
from grapheme_porter.stemmer.phonology import is_consonant, is_vowel

__all__ = [
    "Condition",
    "always",
    "contains_vowel",
    "ends_cvc",
    "ends_double_consonant",
    "m_above",
    "m_above_and_ends_with",
]

Condition = Callable[[Sequence[str]], bool]

# Final consonants that never count for *o
CVC_EXCLUDED = frozenset({"w", "x", "y"})


def always(word: Sequence[str]) -> bool:
    return True


def contains_vowel(stem: Sequence[str]) -> bool:
    """Does: *v*, True if any position of `stem` classifies as a vowel."""
    return any(is_vowel(stem, i) for i in range(len(stem)))


def ends_double_consonant(word: Sequence[str]) -> bool:
    """Does: *d, last two clusters are identical and consonants."""
    n = len(word)
    return n >= 2 and word[-1] == word[-2] and is_consonant(word, n - 1)


def ends_cvc(word: Sequence[str]) -> bool:
    """Does: *o, word ends consonant-vowel-consonant and the last one is not w, x or y.

    e.g. hop, fil, awhil are *o; mix, dew, day are not.
    """
    n = len(word)
    if n < 3 or word[-1] in CVC_EXCLUDED:
        return False
    return (
        is_consonant(word, n - 1)
        and is_vowel(word, n - 2)
        and is_consonant(word, n - 3)
    )


def m_above(threshold: int) -> Condition:
    """Does: Build a guard that holds when measure(stem) > threshold."""

    def guard(stem: Sequence[str]) -> bool:
        return measure(stem) > threshold

    guard.__name__ = f"m>{threshold}"
    return guard


def m_above_and_ends_with(threshold: int, endings: frozenset[str]) -> Condition:
    """Does: Build a guard for measure(stem) > threshold and a stem ending in one of `endings`."""

    def guard(stem: Sequence[str]) -> bool:
        return bool(stem) and stem[-1] in endings and measure(stem) > threshold

    guard.__name__ = f"m>{threshold} and *{'|'.join(sorted(endings))}"
    return guard
