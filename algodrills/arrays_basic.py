"""Classic array exercises: sums, windows, selection and simple sorting tasks."""

from __future__ import annotations

from collections.abc import Sequence


def subarray_with_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return the 1-based (start, end) of the first contiguous run summing to ``target``.

    Values are expected to be non-negative: a run is abandoned as soon as its
    sum exceeds the target.  Returns ``None`` when no run matches.
    """
    for start in range(len(values)):
        running = 0
        for end, value in enumerate(values[start:], start):
            running += value
            if running == target:
                return start + 1, end + 1
            if running > target:
                break
    return None


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    if not values:
        raise ValueError("max_subarray_sum() needs at least one value")
    best = None
    running = 0
    for value in values:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    return best


def missing_number(values: Sequence[int], n: int) -> int:
    """Return the number from 1..n that is absent from ``values`` (which holds n-1 numbers)."""
    if len(values) != n - 1:
        raise ValueError(f"expected {n - 1} values, got {len(values)}")
    return n * (n + 1) // 2 - sum(values)


def sort_binary(values: Sequence[int]) -> list[int]:
    """Return the zeros and ones of ``values`` in ascending order."""
    return sorted(values)


def equilibrium_point(values: Sequence[int]) -> int | None:
    """Return the 1-based position whose left and right sums are equal, or ``None``."""
    if not values:
        raise ValueError("equilibrium_point() needs at least one value")
    if len(values) == 1:
        return 1
    left, right = 0, len(values) - 1
    left_sum, right_sum = values[left], values[right]
    while left < right:
        if left_sum >= right_sum:
            right -= 1
            right_sum += values[right]
        else:
            left += 1
            left_sum += values[left]
    return left + 1 if left_sum == right_sum else None


def max_sum_increasing_subsequence(values: Sequence[int]) -> int:
    """Return the largest sum of a strictly increasing subsequence (at least -1)."""
    best_ending: list[int] = []
    best = -1
    for i, value in enumerate(values):
        candidates = [best_ending[j] + value for j in range(i) if values[j] < value]
        total = max(candidates, default=value)
        total = max(total, value)
        best_ending.append(total)
        best = max(best, total)
    return best


def leaders(values: Sequence[int]) -> list[int]:
    """Return, in original order, the elements not smaller than anything to their right."""
    found: list[int] = []
    for value in reversed(values):
        if not found or value >= found[-1]:
            found.append(value)
    found.reverse()
    return found


def minimum_platforms(arrivals: Sequence[int], departures: Sequence[int]) -> int:
    """Return the number of platforms needed so no train waits."""
    if len(arrivals) != len(departures):
        raise ValueError("arrivals and departures must have the same length")
    if not arrivals:
        raise ValueError("minimum_platforms() needs at least one train")
    arr = sorted(arrivals)
    dep = sorted(departures)
    i, j = 1, 0
    current = best = 1
    while i < len(arr) and j < len(dep):
        if arr[i] <= dep[j]:
            current += 1
            i += 1
            best = max(best, current)
        else:
            current -= 1
            j += 1
    return best


def sliding_window_max(values: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every contiguous window of size ``k``."""
    if k < 1:
        raise ValueError("window size must be at least 1")
    return [max(values[i : i + k]) for i in range(len(values) - k + 1)]


def reverse_in_groups(values: Sequence[int], k: int) -> list[int]:
    """Return ``values`` with every group of ``k`` reversed; a short tail is reversed too."""
    if k < 1:
        raise ValueError("group size must be at least 1")
    result: list[int] = []
    for start in range(0, len(values), k):
        result.extend(reversed(values[start : start + k]))
    return result


def _partition(items: list[int], left: int, right: int) -> int:
    pivot = items[right]
    store = left - 1
    for j in range(left, right):
        if items[j] <= pivot:
            store += 1
            items[store], items[j] = items[j], items[store]
    store += 1
    items[store], items[right] = items[right], items[store]
    return store


def kth_smallest(values: Sequence[int], k: int) -> int:
    """Return the k-th smallest value (1-based) using quickselect."""
    if not 1 <= k <= len(values):
        raise ValueError(f"k must be between 1 and {len(values)}")
    items = list(values)
    left, right = 0, len(items) - 1
    while True:
        index = _partition(items, left, right)
        if index == k - 1:
            return items[index]
        if index < k - 1:
            left = index + 1
        else:
            right = index - 1


def trapped_water(heights: Sequence[int]) -> int:
    """Return the units of rain water held between bars of the given heights."""
    if len(heights) < 3:
        return 0
    left_max: list[int] = []
    for h in heights:
        left_max.append(h if not left_max else max(left_max[-1], h))
    right_max: list[int] = []
    for h in reversed(heights):
        right_max.append(h if not right_max else max(right_max[-1], h))
    right_max.reverse()
    return sum(
        max(0, min(left_max[i - 1], right_max[i + 1]) - heights[i])
        for i in range(1, len(heights) - 1)
    )


def has_pythagorean_triplet(values: Sequence[int]) -> bool:
    """Return whether three values a, b, c satisfy a*a + b*b == c*c."""
    items = sorted(values)
    for i, a in enumerate(items):
        for j in range(i + 1, len(items)):
            legs = a * a + items[j] * items[j]
            for c in items[j + 1 :]:
                if legs == c * c:
                    return True
                if legs < c * c:
                    break
    return False


def min_chocolate_difference(packets: Sequence[int], students: int) -> int:
    """Return the smallest max-min spread when giving one packet to each student."""
    if students < 1:
        raise ValueError("there must be at least one student")
    if students > len(packets):
        raise ValueError("not enough packets for every student")
    items = sorted(packets)
    return min(
        items[i + students - 1] - items[i] for i in range(len(items) - students + 1)
    )