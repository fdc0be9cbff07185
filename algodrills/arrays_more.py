"""More array exercises: trading days, orderings, streams and matrix walks."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence
from functools import cmp_to_key
from itertools import accumulate


def stock_buy_sell(prices: Sequence[int]) -> list[tuple[int, int]]:
    """Return 0-based (buy_day, sell_day) pairs that capture every rising stretch.

    An empty list means no profit can be made.
    """
    if not prices:
        raise ValueError("stock_buy_sell() needs at least one price")
    trades: list[tuple[int, int]] = []
    buy_day = 0
    buy_price = prices[0]
    for day in range(1, len(prices)):
        if prices[day - 1] > prices[day]:
            if buy_day != day - 1:
                trades.append((buy_day, day - 1))
            buy_day, buy_price = day, prices[day]
    last = len(prices) - 1
    if buy_price < prices[last] and buy_day != last:
        trades.append((buy_day, last))
    return trades


def smaller_left_greater_right(values: Sequence[int]) -> int | None:
    """Return the first inner element not smaller than all before it and not
    greater than all after it, or ``None`` if there is none."""
    if len(values) < 3:
        return None
    prefix_max = list(accumulate(values, max))
    suffix_min = list(accumulate(reversed(values), min))
    suffix_min.reverse()
    for i in range(1, len(values) - 1):
        if prefix_max[i - 1] <= values[i] <= suffix_min[i + 1]:
            return values[i]
    return None


def zigzag(values: Sequence[int]) -> list[int]:
    """Return ``values`` rearranged so that a < b > c < d > e ... (allowing ties)."""
    items = list(values)
    for i in range(len(items) - 1):
        out_of_order = items[i] > items[i + 1] if i % 2 == 0 else items[i] < items[i + 1]
        if out_of_order:
            items[i], items[i + 1] = items[i + 1], items[i]
    return items


def single_element(values: Sequence[int]) -> int:
    """Return the one element that is not paired in a sorted sequence of pairs."""
    pairs = zip(values[0::2], values[1::2])
    for index, (first, second) in enumerate(pairs):
        if first != second:
            return values[2 * index]
    if len(values) % 2 == 0:
        raise ValueError("every element appears twice")
    return values[-1]


def kth_largest_stream(values: Iterable[int], k: int) -> list[int | None]:
    """Return, after each value of the stream, the k-th largest seen so far.

    Positions where fewer than ``k`` values have been seen hold ``None``.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    heap: list[int] = []
    result: list[int | None] = []
    for value in values:
        if len(heap) < k:
            heapq.heappush(heap, value)
        elif value > heap[0]:
            heapq.heapreplace(heap, value)
        result.append(heap[0] if len(heap) == k else None)
    return result


def relative_sort(values: Sequence[int], order: Sequence[int]) -> list[int]:
    """Return ``values`` ordered as in ``order``; the rest follow in ascending order."""
    counts = Counter(values)
    result: list[int] = []
    for key in order:
        result.extend([key] * counts.pop(key, 0))
    result.extend(sorted(counts.elements()))
    return result


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of a rectangular matrix in clockwise spiral order."""
    if not matrix:
        return []
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    top, bottom = 0, len(matrix) - 1
    left, right = 0, width - 1
    result: list[int] = []
    while top <= bottom and left <= right:
        result.extend(matrix[top][left : right + 1])
        top += 1
        result.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][col] for col in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
            left += 1
    return result


def sort_by_frequency(values: Sequence[int]) -> list[int]:
    """Return ``values`` sorted by descending frequency, ties by ascending value."""
    counts = Counter(values)
    return sorted(values, key=lambda v: (-counts[v], v))


def _compare_concatenations(a: str, b: str) -> int:
    return int(b + a) - int(a + b)


def largest_number(numbers: Iterable[int | str]) -> str:
    """Return the largest number formed by concatenating the given non-negative numbers."""
    digits = [str(n) for n in numbers]
    for d in digits:
        if not d.isdigit():
            raise ValueError(f"not a non-negative integer: {d!r}")
    return "".join(sorted(digits, key=cmp_to_key(_compare_concatenations)))


def longest_balanced_binary_subarray(values: Sequence[int]) -> int:
    """Return the length of the longest contiguous run with as many 0s as 1s."""
    first_seen = {0: -1}
    balance = 0
    best = 0
    for index, value in enumerate(values):
        if value == 1:
            balance += 1
        elif value == 0:
            balance -= 1
        if balance in first_seen:
            best = max(best, index - first_seen[balance])
        else:
            first_seen[balance] = index
    return best