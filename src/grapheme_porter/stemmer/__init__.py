# grapheme_porter/stemmer/__init__.py
"""
stemmer.
=======

Does: Porter's suffix-stripping algorithm over grapheme clusters.
Exports: stem, stem_graphemes, measure, the condition predicates, and the rule tables.
Used by: Text helpers (grapheme_porter.token), the demo CLI, and library callers.
"""

from __future__ import annotations

from .conditions import contains_vowel, ends_cvc, ends_double_consonant
from .graphemes import Graphemes, graphemes, join_graphemes
from .measure import cv_pattern, measure
from .phonology import VOWELS, is_consonant, is_vowel
from .pipeline import MIN_STEMMABLE_LENGTH, apply_step, stem, stem_graphemes
from .rules import ANY_CLUSTER, PIPELINE, Rule, Step

__all__ = [
    # graphemes
    "Graphemes",
    "graphemes",
    "join_graphemes",
    # classification / measure
    "VOWELS",
    "is_consonant",
    "is_vowel",
    "cv_pattern",
    "measure",
    # predicates
    "contains_vowel",
    "ends_cvc",
    "ends_double_consonant",
    # rules / pipeline
    "ANY_CLUSTER",
    "Rule",
    "Step",
    "PIPELINE",
    "MIN_STEMMABLE_LENGTH",
    "apply_step",
    "stem",
    "stem_graphemes",
]
