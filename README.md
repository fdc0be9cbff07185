# algodrills

A library of classic algorithm exercises: array puzzles, string routines,
singly linked list operations, greedy strategies, sorting and searching, and
dynamic programming over pairs of sequences. Every function takes ordinary
Python values and returns a result; nothing is printed and nothing is read
from files.

It has no dependencies beyond the standard library and needs Python 3.10 or
later.

## Installation

```
pip install .
```

## Modules

### `algodrills.arrays_basic`

- `subarray_with_sum(values, target)`: 1-based `(start, end)` of the first
  contiguous run of non-negative values adding up to `target`, or `None`.
- `max_subarray_sum(values)`: largest sum of a non-empty contiguous run.
- `missing_number(values, n)`: the number from 1..n absent from `n - 1` values.
- `sort_binary(values)`: zeros and ones in ascending order.
- `equilibrium_point(values)`: 1-based position whose left and right sums
  are equal, or `None`.
- `max_sum_increasing_subsequence(values)`: largest sum of a strictly
  increasing subsequence.
- `leaders(values)`: elements not smaller than anything to their right.
- `minimum_platforms(arrivals, departures)`: platforms needed so no train waits.
- `sliding_window_max(values, k)`: maximum of every window of size `k`.
- `reverse_in_groups(values, k)`: every group of `k` reversed, short tail included.
- `kth_smallest(values, k)`: k-th smallest value by quickselect.
- `trapped_water(heights)`: units of rain water held between bars.
- `has_pythagorean_triplet(values)`: whether some `a*a + b*b == c*c`.
- `min_chocolate_difference(packets, students)`: smallest spread when each
  student gets one packet.

### `algodrills.arrays_more`

- `stock_buy_sell(prices)`: 0-based `(buy_day, sell_day)` pairs covering each
  rising stretch; an empty list when no profit is possible.
- `smaller_left_greater_right(values)`: first inner element not smaller than
  everything before it and not greater than everything after it, or `None`.
- `zigzag(values)`: values rearranged as `a <= b >= c <= d ...`.
- `single_element(values)`: the unpaired element of a sorted sequence of pairs.
- `kth_largest_stream(values, k)`: the k-th largest after each value, `None`
  until `k` values have been seen.
- `relative_sort(values, order)`: values ordered by `order`, the rest ascending.
- `spiral_order(matrix)`: elements of a rectangular matrix in clockwise spiral.
- `sort_by_frequency(values)`: descending frequency, ties by ascending value.
- `largest_number(numbers)`: largest number, as a string, formed by
  concatenating non-negative integers.
- `longest_balanced_binary_subarray(values)`: longest run with equal 0s and 1s.

### `algodrills.greedy`

- `max_activities(starts, ends)`: how many non-overlapping activities fit.
- `schedule_meetings(starts, ends)`: 1-based numbers of meetings chosen for one room.
- `min_coins(amount)`: fewest coins and notes, largest first, from the
  denominations in `COINS` (1, 2, 5, 10, 20, 50, 100, 200, 500, 2000).
- `lru_page_faults(pages, capacity)`: page faults with a least-recently-used cache.
- `largest_number_with_digit_sum(digits, total)`: largest number with that many
  digits adding up to `total`, or `None` if unreachable.
- `max_toys(prices, budget)`: how many toys can be bought, cheapest first.

### `algodrills.linked_list`

- `Node(data, next=None)`: a singly linked list node; nodes compare by identity.
- `from_values(values)` and `to_values(head)` build a list and read it back;
  `to_values` raises `ValueError` on a looping list.
- `middle(head)`, `reverse(head)`, `has_loop(head)`, `remove_loop(head)`,
  `nth_from_end(head, n)`, `intersection_point(head1, head2)` and
  `pairwise_swap(head)`.

### `algodrills.linked_rotate`

- `rotate_left(head, k)`: move the first `k` nodes to the end; `k` larger
  than the list raises `ValueError`.
- `rotate_right(head, k)`: move the last `k` nodes to the front; a `k` at least
  the list's length leaves it unchanged.

### `algodrills.dynamic`

- `edit_distance(first, second)` (bottom-up) and `edit_distance_memo(first, second)`
  (memoised recursion): Levenshtein distance.
- `longest_common_subsequence(first, second)`: length of the longest common subsequence.

### `algodrills.sorting`

- `merge_sort(values)` and `quick_sort(values)` return new sorted lists.
- `binary_search(values, key)`: index of `key` in a sorted sequence, or `None`.

### `algodrills.text`

- `remove_duplicates`, `mirror`, `longest_distinct_run`, `parse_int`, `find`,
  `longest_common_prefix`, `is_balanced`, `reverse_words`, `permutations`
  (a generator), `longest_palindrome`, `remove_adjacent_duplicates`,
  `is_rotated_two_places`, `roman_to_int`, `is_anagram` and
  `longest_common_substring`.

Some of these follow particular rules worth knowing: `find` returns -1 when
the needle is absent or empty; `parse_int` accepts only an optional `-` and
decimal digits and raises `ValueError` otherwise; `is_balanced` counts each
bracket kind separately and does not check how kinds interleave;
`longest_common_prefix` returns `None` when there is no common prefix;
`reverse_words` works on dot-separated words.

## Examples

```python
from algodrills.arrays_basic import max_subarray_sum, trapped_water
from algodrills.dynamic import edit_distance
from algodrills.linked_list import from_values, reverse, to_values
from algodrills.text import roman_to_int

max_subarray_sum([1, 2, 3, -2, 5])           # 9
trapped_water([3, 0, 0, 2, 0, 4])            # 10
edit_distance("geek", "gesek")               # 1
roman_to_int("XIV")                          # 14
to_values(reverse(from_values([1, 2, 3])))   # [3, 2, 1]
```

## What it does not do

The package is a library only. It has no command-line program and does not
read test-case files or standard input; call the functions from your own code.

## Running the tests

```
pip install .[test]
pytest
```