# src/grapheme_porter/stemmer/pipeline.py
from __future__ import annotations

"""
stemmer.pipeline

Does: Run the Porter steps (1a, 1b [+ cleanup], 1c, 2, 3, 4, 5a, 5b) over a grapheme tuple.
Returns: stem() → str, stem_graphemes() → tuple, apply_step() and one function per step.
Used by: grapheme_porter public API, token.stem_text, and the demo CLI.
"""

import logging
from typing import Sequence

from grapheme_porter.stemmer.graphemes import Graphemes, graphemes, join_graphemes
from grapheme_porter.stemmer.rules import (
    PIPELINE,
    STEP_1A,
    STEP_1B,
    STEP_1B_CLEANUP,
    STEP_1C,
    STEP_2,
    STEP_3,
    STEP_4,
    STEP_5A,
    STEP_5B,
    Step,
)

__all__ = [
    "MIN_STEMMABLE_LENGTH",
    "apply_step",
    "stem",
    "stem_graphemes",
    "step_1a",
    "step_1b",
    "step_1b_cleanup",
    "step_1c",
    "step_2",
    "step_3",
    "step_4",
    "step_5a",
    "step_5b",
]

log = logging.getLogger(__name__)

# Words shorter than this are returned untouched ("as", "is", "by").
MIN_STEMMABLE_LENGTH = 3


def apply_step(step: Step, word: Sequence[str], debug: bool = False) -> Graphemes:
    """
    Does: Try the step's rules in declared order; the first rule whose suffix matches and whose
          guard holds rewrites the word (then runs its cleanup step, if any).
    Returns: New grapheme tuple; the input unchanged when no rule fires.
    """
    word = tuple(word)
    for rule in step.rules:
        if not rule.matches(word):
            continue
        if not rule.holds(word):
            if rule.exclusive:
                if debug:
                    log.debug("[%s] %s blocks the step for %r", step.name, rule.describe(), join_graphemes(word))
                return word
            continue

        out = rule.rewrite(word)
        if debug:
            log.debug("[%s] %r → %r via %s", step.name, join_graphemes(word), join_graphemes(out), rule.describe())
        if rule.cleanup is not None:
            out = apply_step(rule.cleanup, out, debug=debug)
        return out
    return word


def step_1a(word: Sequence[str], debug: bool = False) -> Graphemes:
    return apply_step(STEP_1A, word, debug)


def step_1b(word: Sequence[str], debug: bool = False) -> Graphemes:
    return apply_step(STEP_1B, word, debug)


def step_1b_cleanup(word: Sequence[str], debug: bool = False) -> Graphemes:
    return apply_step(STEP_1B_CLEANUP, word, debug)


def step_1c(word: Sequence[str], debug: bool = False) -> Graphemes:
    return apply_step(STEP_1C, word, debug)


def step_2(word: Sequence[str], debug: bool = False) -> Graphemes:
    return apply_step(STEP_2, word, debug)


def step_3(word: Sequence[str], debug: bool = False) -> Graphemes:
    return apply_step(STEP_3, word, debug)


def step_4(word: Sequence[str], debug: bool = False) -> Graphemes:
    return apply_step(STEP_4, word, debug)


def step_5a(word: Sequence[str], debug: bool = False) -> Graphemes:
    return apply_step(STEP_5A, word, debug)


def step_5b(word: Sequence[str], debug: bool = False) -> Graphemes:
    return apply_step(STEP_5B, word, debug)


def stem_graphemes(word: Sequence[str], debug: bool = False) -> Graphemes:
    """
    Does: Stem a word already split into grapheme clusters.
    Returns: Stemmed clusters. Words of fewer than MIN_STEMMABLE_LENGTH clusters come back as-is.

    >>> stem_graphemes(("s", "t", "e", "m", "m", "i", "n", "g"))
    ('s', 't', 'e', 'm')
    """
    word = tuple(word)
    if len(word) < MIN_STEMMABLE_LENGTH:
        return word
    for step in PIPELINE:
        word = apply_step(step, word, debug=debug)
    return word


def stem(word: str, debug: bool = False) -> str:
    """
    Does: Stem a single (already lowercased, if wanted) word with Porter's algorithm.
    Returns: The stemmed word; total and deterministic.

    >>> stem("totally")
    'total'
    """
    return join_graphemes(stem_graphemes(graphemes(word), debug=debug))
