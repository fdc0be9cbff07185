"""Dynamic programming over pairs of sequences."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache


def edit_distance(first: Sequence, second: Sequence) -> int:
    """Return the Levenshtein distance between two sequences (bottom-up table)."""
    previous = list(range(len(second) + 1))
    for i, a in enumerate(first, 1):
        current = [i]
        for j, b in enumerate(second, 1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]


def edit_distance_memo(first: Sequence, second: Sequence) -> int:
    """Return the Levenshtein distance using top-down memoised recursion."""

    @lru_cache(maxsize=None)
    def distance(m: int, n: int) -> int:
        if m == 0:
            return n
        if n == 0:
            return m
        if first[m - 1] == second[n - 1]:
            return distance(m - 1, n - 1)
        return 1 + min(
            distance(m - 1, n),
            distance(m, n - 1),
            distance(m - 1, n - 1),
        )

    return distance(len(first), len(second))


def longest_common_subsequence(first: Sequence, second: Sequence) -> int:
    """Return the length of the longest subsequence common to both sequences."""
    previous = [0] * (len(first) + 1)
    for b in second:
        current = [0]
        for j, a in enumerate(first, 1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]