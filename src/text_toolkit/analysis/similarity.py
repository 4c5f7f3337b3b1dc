from __future__ import annotations

"""Normalised edit-distance similarity."""

from typing import Tuple

from ..utils.edit_distance import levenshtein


def distance_and_similarity(a: str, b: str) -> Tuple[int, float]:
    """Return the edit distance of *a* and *b* together with its normalised score."""

    max_len = max(len(a), len(b))
    if max_len == 0:
        return 0, 1.0
    distance = levenshtein(a, b)
    return distance, (max_len - distance) / max_len


def similarity(a: str, b: str) -> float:
    """Score how alike *a* and *b* are, from 0.0 (disjoint) to 1.0 (equal).

    The score is ``(max_len - distance) / max_len`` where ``distance`` is the
    Levenshtein distance and ``max_len`` the longer input's length, counted
    in code points. Two empty strings are identical and score 1.0.
    """

    return distance_and_similarity(a, b)[1]
