"""
grapheme_porter
===============

Does: Root package for the grapheme-aware Porter stemmer.
Returns: Exposes `stem` and `stem_graphemes`; subpackages `stemmer`, `token`, `utils`.
Used by: All imports starting from `grapheme_porter.*`.
"""

from grapheme_porter.stemmer import stem, stem_graphemes

__all__: list[str] = ["stem", "stem_graphemes"]
__docformat__ = "google"
