"""Search package exports.

Holds the fuzzy ranking engine used by the directory browser and batch mode.
"""

from __future__ import annotations

from .fuzzy import FuzzyMatch, fuzzy_match, fuzzy_score, rank_candidates

__all__ = [
    "FuzzyMatch",
    "fuzzy_match",
    "fuzzy_score",
    "rank_candidates",
]
