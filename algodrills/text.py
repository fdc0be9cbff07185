"""String exercises: scanning, matching, parsing and palindromes."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Sequence
from itertools import groupby

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_BRACKET_PAIRS = {"(": ")", "[": "]", "{": "}"}


def remove_duplicates(text: str) -> str:
    """Return ``text`` keeping only the first occurrence of each character."""
    return "".join(dict.fromkeys(text))


def mirror(text: str) -> str:
    """Return ``text`` followed by its reverse, which is always a palindrome."""
    return text + text[::-1]


def longest_distinct_run(text: str) -> int:
    """Return the longest segment of distinct characters.

    The text is cut greedily: whenever a character repeats inside the current
    segment, a new segment starts at that character.
    """
    seen: set[str] = set()
    best = 0
    for char in text:
        if char in seen:
            best = max(best, len(seen))
            seen = {char}
        else:
            seen.add(char)
    return max(best, len(seen))


def parse_int(text: str) -> int:
    """Parse an optional ``-`` followed by decimal digits.

    An empty digit part parses as zero; any other character is an error.
    """
    sign = 1
    digits = text
    if digits.startswith("-"):
        sign = -1
        digits = digits[1:]
    result = 0
    for char in digits:
        if not "0" <= char <= "9":
            raise ValueError(f"invalid integer literal: {text!r}")
        result = result * 10 + (ord(char) - ord("0"))
    return sign * result


def find(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1.

    An empty needle is never found.
    """
    if not needle:
        return -1
    for start in range(len(haystack) - len(needle) + 1):
        if haystack.startswith(needle, start):
            return start
    return -1


def longest_common_prefix(words: Sequence[str]) -> str | None:
    """Return the longest prefix shared by all ``words``, or ``None`` if it is empty."""
    if not words:
        raise ValueError("longest_common_prefix() needs at least one word")
    prefix: list[str] = []
    for chars in zip(*words):
        if any(c != chars[0] for c in chars):
            break
        prefix.append(chars[0])
    return "".join(prefix) or None


def is_balanced(text: str) -> bool:
    """Return whether every bracket kind is balanced on its own.

    Each of (), [] and {} is counted separately: a count may never drop below
    zero and must end at zero. Interleaving of different kinds is not checked.
    """
    counts = dict.fromkeys(_BRACKET_PAIRS, 0)
    closers = {close: open_ for open_, close in _BRACKET_PAIRS.items()}
    for char in text:
        if char in counts:
            counts[char] += 1
        elif char in closers:
            counts[closers[char]] -= 1
            if counts[closers[char]] < 0:
                return False
    return all(count == 0 for count in counts.values())


def reverse_words(text: str) -> str:
    """Return the dot-separated words of ``text`` in reverse order.

    A single trailing dot is dropped.
    """
    words = text.split(".")
    if text.endswith("."):
        words.pop()
    return ".".join(reversed(words))


def permutations(text: str) -> Iterator[str]:
    """Yield every arrangement of ``text`` in swap-and-backtrack order."""
    chars = list(text)

    def arrange(start: int) -> Iterator[str]:
        if start == len(chars) - 1:
            yield "".join(chars)
            return
        for i in range(start, len(chars)):
            chars[start], chars[i] = chars[i], chars[start]
            yield from arrange(start + 1)
            chars[start], chars[i] = chars[i], chars[start]

    if chars:
        yield from arrange(0)


def longest_palindrome(text: str) -> str:
    """Return the longest palindromic substring; the earliest one wins ties."""
    best_start, best_len = 0, min(len(text), 1)
    for center in range(len(text)):
        for left, right in ((center, center), (center, center + 1)):
            while left >= 0 and right < len(text) and text[left] == text[right]:
                left -= 1
                right += 1
            length = right - left - 1
            if length > best_len:
                best_start, best_len = left + 1, length
    return text[best_start : best_start + best_len]


def remove_adjacent_duplicates(text: str) -> str:
    """Repeatedly drop every run of equal adjacent characters until none remain."""
    while True:
        reduced = "".join(
            key for key, run in groupby(text) if sum(1 for _ in run) == 1
        )
        if reduced == text:
            return reduced
        text = reduced


def is_rotated_two_places(first: str, second: str) -> bool:
    """Return whether ``second`` rotated two places either way equals ``first``."""
    right = second[-2:] + second[:-2]
    left = second[2:] + second[:2]
    return first in (right, left)


def roman_to_int(text: str) -> int:
    """Return the value of a Roman numeral; unknown characters are ignored."""
    result = 0
    largest = 0
    for char in reversed(text):
        value = _ROMAN_VALUES.get(char)
        if value is None:
            continue
        if largest > value:
            result -= value
        else:
            result += value
            largest = value
    return result


def is_anagram(first: str, second: str) -> bool:
    """Return whether the two strings hold the same characters the same number of times."""
    return Counter(first) == Counter(second)


def longest_common_substring(first: str, second: str) -> int:
    """Return the length of the longest contiguous substring common to both."""
    best = 0
    previous = [0] * (len(first) + 1)
    for b in second:
        current = [0]
        for j, a in enumerate(first, 1):
            run = previous[j - 1] + 1 if a == b else 0
            current.append(run)
            best = max(best, run)
        previous = current
    return best