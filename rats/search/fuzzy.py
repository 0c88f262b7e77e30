from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

SEPARATOR_CHARS = frozenset("/_-.")
MATCH_SCORE = 10
CONSECUTIVE_BONUS = 5
LEADING_BONUS = 15
SEPARATOR_BONUS = 10


@dataclass(frozen=True)
class FuzzyMatch:
    """Score plus matched positions within the lowercased candidate."""

    score: int
    matched_indices: tuple[int, ...] = ()


def fuzzy_match(pattern: str, candidate: str) -> FuzzyMatch | None:
    """Greedy case-insensitive subsequence match of ``pattern`` in ``candidate``.

    Each hit scores ``MATCH_SCORE`` plus bonuses for runs, index 0, and hits
    right after a separator. The total is reduced by the candidate length so
    shorter names win ties in match quality.
    """
    if not pattern:
        return FuzzyMatch(score=0)

    pattern_lower = pattern.lower()
    candidate_lower = candidate.lower()
    pattern_len = len(pattern_lower)

    score = 0
    matched: list[int] = []
    pattern_idx = 0
    last_idx = -1
    for idx, ch in enumerate(candidate_lower):
        if pattern_idx >= pattern_len:
            break
        if ch != pattern_lower[pattern_idx]:
            continue
        score += MATCH_SCORE
        if matched and idx == last_idx + 1:
            score += CONSECUTIVE_BONUS
        if idx == 0:
            score += LEADING_BONUS
        elif candidate_lower[idx - 1] in SEPARATOR_CHARS:
            score += SEPARATOR_BONUS
        matched.append(idx)
        last_idx = idx
        pattern_idx += 1

    if pattern_idx < pattern_len:
        return None
    return FuzzyMatch(score=score - len(candidate_lower), matched_indices=tuple(matched))


def fuzzy_score(pattern: str, candidate: str) -> int | None:
    match = fuzzy_match(pattern, candidate)
    if match is None:
        return None
    return match.score


def rank_candidates(pattern: str, candidates: Sequence[str]) -> list[tuple[int, int]]:
    """Return ``(index, score)`` for matching candidates, best score first.

    ``list.sort`` is stable, so equal scores keep their input order.
    """
    scored: list[tuple[int, int]] = []
    for idx, candidate in enumerate(candidates):
        score = fuzzy_score(pattern, candidate)
        if score is None:
            continue
        scored.append((idx, score))
    scored.sort(key=lambda item: -item[1])
    return scored
