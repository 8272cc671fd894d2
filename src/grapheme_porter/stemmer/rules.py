# src/grapheme_porter/stemmer/rules.py
from __future__ import annotations

"""
stemmer.rules

Does: Declare the Porter rule tables as static data: one ordered tuple of Rule records per step.
Returns: Rule, Step, ANY_CLUSTER and the STEP_* tables (PIPELINE lists them in execution order).
Used by: stemmer.pipeline (apply_step) and tests that audit rules one by one.

Within a step the first rule whose suffix matches AND whose condition holds fires; where one
suffix ends another, the longer one is declared first. Step 1a keeps Porter's literal order.
"""

from dataclasses import dataclass
from typing import Literal, Optional, Sequence, Tuple, Union

from grapheme_porter.stemmer.conditions import (
    Condition,
    always,
    contains_vowel,
    ends_cvc,
    ends_double_consonant,
    m_above,
    m_above_and_ends_with,
)
from grapheme_porter.stemmer.graphemes import Graphemes
from grapheme_porter.stemmer.measure import measure

__all__ = [
    "ANY_CLUSTER",
    "Rule",
    "Step",
    "STEP_1A",
    "STEP_1B",
    "STEP_1B_CLEANUP",
    "STEP_1C",
    "STEP_2",
    "STEP_3",
    "STEP_4",
    "STEP_5A",
    "STEP_5B",
    "PIPELINE",
]


class _AnyCluster:
    """Wildcard suffix pattern: matches exactly one cluster, whatever it is."""

    def __repr__(self) -> str:
        return "ANY_CLUSTER"


ANY_CLUSTER = _AnyCluster()

Pattern = Union[str, _AnyCluster]


@dataclass(frozen=True)
class Rule:
    """One suffix rewrite: `suffix` → `replacement` when `condition` holds.

    Attributes:
        suffix: cluster patterns matched against the end of the word.
        replacement: clusters written in place of the matched suffix.
        condition: guard evaluated on the stem (word minus suffix) or, with
            guard_on="word", on the whole word.
        exclusive: a suffix match ends the step even when the condition fails.
        cleanup: step applied right after this rule fires.
    """

    suffix: Tuple[Pattern, ...]
    replacement: Graphemes = ()
    condition: Condition = always
    guard_on: Literal["stem", "word"] = "stem"
    exclusive: bool = False
    cleanup: Optional["Step"] = None

    def matches(self, word: Sequence[str]) -> bool:
        n = len(self.suffix)
        if n > len(word):
            return False
        tail = word[len(word) - n:]
        return all(p is ANY_CLUSTER or p == c for p, c in zip(self.suffix, tail))

    def stem_of(self, word: Sequence[str]) -> Graphemes:
        return tuple(word[: len(word) - len(self.suffix)])

    def holds(self, word: Sequence[str]) -> bool:
        target = word if self.guard_on == "word" else self.stem_of(word)
        return self.condition(target)

    def rewrite(self, word: Sequence[str]) -> Graphemes:
        return self.stem_of(word) + self.replacement

    def describe(self) -> str:
        suffix = "".join("*" if p is ANY_CLUSTER else p for p in self.suffix)
        name = getattr(self.condition, "__name__", "guard")
        return f"-{suffix or '∅'} → -{''.join(self.replacement) or '∅'} [{name}]"


@dataclass(frozen=True)
class Step:
    name: str
    rules: Tuple[Rule, ...]


def _rule(suffix: str, replacement: str = "", condition: Condition = always, **kw) -> Rule:
    """Does: Shorthand for ASCII rules (one letter per cluster)."""
    return Rule(tuple(suffix), tuple(replacement), condition, **kw)


# ── Guards specific to one step ─────────────────────────────────────────────
def _undoublable(word: Sequence[str]) -> bool:
    """*d and not (*l or *s or *z)."""
    return ends_double_consonant(word) and word[-1] not in {"l", "s", "z"}


def _short_cvc(word: Sequence[str]) -> bool:
    """m=1 and *o."""
    return measure(word) == 1 and ends_cvc(word)


def _drops_final_e(stem: Sequence[str]) -> bool:
    """(m>1) or (m=1 and not *o)."""
    m = measure(stem)
    return m > 1 or (m == 1 and not ends_cvc(stem))


def _long_double_l(word: Sequence[str]) -> bool:
    """m>1 and *d and *l."""
    return ends_double_consonant(word) and measure(word) > 1


_m_gt_0 = m_above(0)
_m_gt_1 = m_above(1)


# ── Step 1a: plurals ─────────────────────────────────────────────────────────
STEP_1A = Step("1a", (
    _rule("sses", "ss"),   # caresses → caress
    _rule("ies", "i"),     # ponies → poni
    _rule("ss", "ss"),     # caress → caress
    _rule("s", ""),        # cats → cat
))

# ── Step 1b¹: tidy up after -ed / -ing ──────────────────────────────────────
STEP_1B_CLEANUP = Step("1b-cleanup", (
    _rule("at", "ate"),    # conflat(ed) → conflate
    _rule("bl", "ble"),    # troubl(ed) → trouble
    _rule("iz", "ize"),    # siz(ed) → size
    Rule((ANY_CLUSTER,), (), _undoublable, guard_on="word"),  # hopp(ing) → hop
    Rule((), ("e",), _short_cvc, guard_on="word"),            # fil(ing) → file
))

# ── Step 1b: past tense / progressive ───────────────────────────────────────
STEP_1B = Step("1b", (
    _rule("eed", "ee", _m_gt_0, exclusive=True),           # agreed → agree, feed → feed
    _rule("ed", "", contains_vowel, cleanup=STEP_1B_CLEANUP),   # plastered → plaster
    _rule("ing", "", contains_vowel, cleanup=STEP_1B_CLEANUP),  # motoring → motor
))

# ── Step 1c: terminal y ─────────────────────────────────────────────────────
STEP_1C = Step("1c", (
    _rule("y", "i", contains_vowel),  # happy → happi, sky → sky
))

# ── Step 2: double suffixes to single ones ──────────────────────────────────
STEP_2 = Step("2", (
    _rule("ational", "ate", _m_gt_0),   # relational → relate
    _rule("tional", "tion", _m_gt_0),   # conditional → condition
    _rule("enci", "ence", _m_gt_0),     # valenci → valence
    _rule("anci", "ance", _m_gt_0),     # hesitanci → hesitance
    _rule("izer", "ize", _m_gt_0),      # digitizer → digitize
    _rule("abli", "able", _m_gt_0),     # conformabli → conformable
    _rule("alli", "al", _m_gt_0),       # radicalli → radical
    _rule("entli", "ent", _m_gt_0),     # differentli → different
    _rule("eli", "e", _m_gt_0),         # vileli → vile
    _rule("ousli", "ous", _m_gt_0),     # analogousli → analogous
    _rule("ization", "ize", _m_gt_0),   # vietnamization → vietnamize
    _rule("ation", "ate", _m_gt_0),     # predication → predicate
    _rule("ator", "ate", _m_gt_0),      # operator → operate
    _rule("alism", "al", _m_gt_0),      # feudalism → feudal
    _rule("iveness", "ive", _m_gt_0),   # decisiveness → decisive
    _rule("fulness", "ful", _m_gt_0),   # hopefulness → hopeful
    _rule("ousness", "ous", _m_gt_0),   # callousness → callous
    _rule("aliti", "al", _m_gt_0),      # formaliti → formal
    _rule("iviti", "ive", _m_gt_0),     # sensitiviti → sensitive
    _rule("biliti", "ble", _m_gt_0),    # sensibiliti → sensible
))

# ── Step 3: -ic-, -full, -ness etc. ─────────────────────────────────────────
STEP_3 = Step("3", (
    _rule("icate", "ic", _m_gt_0),  # triplicate → triplic
    _rule("ative", "", _m_gt_0),    # formative → form
    _rule("alize", "al", _m_gt_0),  # formalize → formal
    _rule("iciti", "ic", _m_gt_0),  # electriciti → electric
    _rule("ical", "ic", _m_gt_0),   # electrical → electric
    _rule("ful", "", _m_gt_0),      # hopeful → hope
    _rule("ness", "", _m_gt_0),     # goodness → good
))

# ── Step 4: strip -ant, -ence etc. in context <c>vcvc<v> ────────────────────
STEP_4 = Step("4", (
    _rule("al", "", _m_gt_1),       # revival → reviv
    _rule("ance", "", _m_gt_1),     # allowance → allow
    _rule("ence", "", _m_gt_1),     # inference → infer
    _rule("er", "", _m_gt_1),       # airliner → airlin
    _rule("ic", "", _m_gt_1),       # gyroscopic → gyroscop
    _rule("able", "", _m_gt_1),     # adjustable → adjust
    _rule("ible", "", _m_gt_1),     # defensible → defens
    _rule("ant", "", _m_gt_1),      # irritant → irrit
    _rule("ement", "", _m_gt_1),    # replacement → replac
    _rule("ment", "", _m_gt_1),     # adjustment → adjust
    _rule("ent", "", _m_gt_1),      # dependent → depend
    _rule("ion", "", m_above_and_ends_with(1, frozenset({"s", "t"}))),  # adoption → adopt
    _rule("ou", "", _m_gt_1),       # homologou → homolog
    _rule("ism", "", _m_gt_1),      # communism → commun
    _rule("ate", "", _m_gt_1),      # activate → activ
    _rule("iti", "", _m_gt_1),      # angulariti → angular
    _rule("ous", "", _m_gt_1),      # homologous → homolog
    _rule("ive", "", _m_gt_1),      # effective → effect
    _rule("ize", "", _m_gt_1),      # bowdlerize → bowdler
))

# ── Step 5: final -e and -ll ────────────────────────────────────────────────
STEP_5A = Step("5a", (
    _rule("e", "", _drops_final_e),  # probate → probat, rate → rate, cease → ceas
))

STEP_5B = Step("5b", (
    Rule(("l",), (), _long_double_l, guard_on="word"),  # controll → control, roll → roll
))

# 1b-cleanup is reached through STEP_1B's ed/ing rules, never run on its own.
PIPELINE: Tuple[Step, ...] = (
    STEP_1A,
    STEP_1B,
    STEP_1C,
    STEP_2,
    STEP_3,
    STEP_4,
    STEP_5A,
    STEP_5B,
)
