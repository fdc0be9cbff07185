"""Greedy exercises: scheduling, change making, paging and budgets."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Iterable, Sequence
from typing import NamedTuple

COINS = (1, 2, 5, 10, 20, 50, 100, 200, 500, 2000)


class _Meeting(NamedTuple):
    start: int
    end: int
    ident: int

    def overlaps(self, other: _Meeting) -> bool:
        return self.start < other.end and self.end > other.start


def _select_meetings(starts: Sequence[int], ends: Sequence[int]) -> list[_Meeting]:
    if len(starts) != len(ends):
        raise ValueError("starts and ends must have the same length")
    if not starts:
        raise ValueError("at least one meeting is needed")
    meetings = sorted(
        (_Meeting(s, e, i) for i, (s, e) in enumerate(zip(starts, ends), 1)),
        key=lambda m: m.end,
    )
    chosen = [meetings[0]]
    for meeting in meetings[1:]:
        if not chosen[-1].overlaps(meeting):
            chosen.append(meeting)
    return chosen


def max_activities(starts: Sequence[int], ends: Sequence[int]) -> int:
    """Return how many non-overlapping activities one person can attend."""
    return len(_select_meetings(starts, ends))


def schedule_meetings(starts: Sequence[int], ends: Sequence[int]) -> list[int]:
    """Return the 1-based numbers of the meetings chosen for a single room."""
    return [meeting.ident for meeting in _select_meetings(starts, ends)]


def min_coins(amount: int) -> list[int]:
    """Return the fewest coins and notes, largest first, that make up ``amount``."""
    change: list[int] = []
    for coin in reversed(COINS):
        count, amount = divmod(amount, coin) if amount > 0 else (0, amount)
        change.extend([coin] * count)
    return change


def lru_page_faults(pages: Iterable[int], capacity: int) -> int:
    """Return the number of page faults with a least-recently-used cache."""
    if capacity < 1:
        raise ValueError("capacity must be at least 1")
    frames: OrderedDict[int, None] = OrderedDict()
    faults = 0
    for page in pages:
        if page in frames:
            frames.move_to_end(page)
            continue
        faults += 1
        if len(frames) >= capacity:
            frames.popitem(last=False)
        frames[page] = None
    return faults


def largest_number_with_digit_sum(digits: int, total: int) -> int | None:
    """Return the largest ``digits``-digit number whose digits add up to ``total``.

    Returns ``None`` when the digits cannot reach the total.
    """
    result = 0
    remaining = total
    for _ in range(digits):
        digit = min(9, remaining)
        result = result * 10 + digit
        remaining -= digit
    return None if remaining > 0 else result


def max_toys(prices: Iterable[int], budget: int) -> int:
    """Return how many toys can be bought, cheapest first, within ``budget``."""
    bought = 0
    for price in sorted(prices):
        if budget - price < 0:
            break
        budget -= price
        bought += 1
    return bought