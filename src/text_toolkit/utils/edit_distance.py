from __future__ import annotations

"""Levenshtein edit distance."""

from typing import Hashable, Sequence


def levenshtein(a: Sequence[Hashable] | str, b: Sequence[Hashable] | str) -> int:
    """Return the Levenshtein distance between *a* and *b*.

    Strings are compared code point by code point, so a base letter followed
    by a combining accent counts as two units. The table is kept as one row
    over the shorter input, updated in place.
    """

    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    row = list(range(len(b) + 1))
    for i, item_a in enumerate(a, start=1):
        diagonal, row[0] = row[0], i
        for j, item_b in enumerate(b, start=1):
            substitution = diagonal + (item_a != item_b)
            diagonal = row[j]
            row[j] = min(row[j] + 1, row[j - 1] + 1, substitution)
    return row[-1]
