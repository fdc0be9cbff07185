import itertools

import pytest

from algodrills.text import (
    find,
    is_anagram,
    is_balanced,
    is_rotated_two_places,
    longest_common_prefix,
    longest_common_substring,
    longest_distinct_run,
    longest_palindrome,
    mirror,
    parse_int,
    permutations,
    remove_adjacent_duplicates,
    remove_duplicates,
    reverse_words,
    roman_to_int,
)


def _to_roman(number):
    table = [
        (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"), (100, "C"), (90, "XC"),
        (50, "L"), (40, "XL"), (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
    ]
    parts = []
    for value, symbol in table:
        count, number = divmod(number, value)
        parts.append(symbol * count)
    return "".join(parts)


def _is_subsequence(small, big):
    it = iter(big)
    return all(ch in it for ch in small)


@pytest.mark.parametrize("text", ["geeksforgeeks", "hello world", "", "aaaa"])
def test_remove_duplicates_keeps_first_occurrences(text):
    result = remove_duplicates(text)
    assert len(result) == len(set(result))
    assert set(result) == set(text)
    assert _is_subsequence(result, text)


@pytest.mark.parametrize("text", ["abc", "race", "", "x"])
def test_mirror_is_palindrome(text):
    result = mirror(text)
    assert result == result[::-1]
    assert result.startswith(text)
    assert len(result) == 2 * len(text)


def test_longest_distinct_run_all_distinct():
    assert longest_distinct_run("abcdef") == len("abcdef")
    assert longest_distinct_run("") == 0


def test_longest_distinct_run_repeated_block():
    block = "qwerty"
    assert longest_distinct_run(block + block) == len(block)


@pytest.mark.parametrize("literal", ["0", "123", "-45", "9876543210", "-0"])
def test_parse_int_matches_int(literal):
    assert parse_int(literal) == int(literal)


@pytest.mark.parametrize("literal", ["12a", "+5", "1-2", " 7"])
def test_parse_int_rejects_bad_characters(literal):
    with pytest.raises(ValueError):
        parse_int(literal)


@pytest.mark.parametrize(
    "haystack, needle",
    [("twoyearsleft.", "left"), ("aaab", "ab"), ("abc", "d"), ("abc", "abcd"), ("x", "x")],
)
def test_find_agrees_with_str_find(haystack, needle):
    assert find(haystack, needle) == haystack.find(needle)


def test_find_empty_needle_is_not_found():
    assert find("abc", "") == -1


def test_longest_common_prefix_shared():
    prefix = "inter"
    words = [prefix + "net", prefix + "stellar", prefix + "val"]
    assert longest_common_prefix(words) == prefix


def test_longest_common_prefix_none_and_single():
    assert longest_common_prefix(["abc", "xyz"]) is None
    assert longest_common_prefix(["solo"]) == "solo"


def test_longest_common_prefix_needs_words():
    with pytest.raises(ValueError):
        longest_common_prefix([])


@pytest.mark.parametrize("text", ["({[]})", "()[]{}", "", "[(])"])
def test_is_balanced_true(text):
    assert is_balanced(text) is True


@pytest.mark.parametrize("text", ["(()", ")(", "{", "[]]"])
def test_is_balanced_false(text):
    assert is_balanced(text) is False


@pytest.mark.parametrize("text", ["i.like.this.program.very.much", "one", "a..b"])
def test_reverse_words_reverses_order(text):
    result = reverse_words(text)
    assert result.split(".") == text.split(".")[::-1]
    assert reverse_words(result) == text


def test_reverse_words_drops_trailing_dot():
    assert reverse_words("a.b.") == reverse_words("a.b")


def test_permutations_order():
    assert list(permutations("abc")) == ["abc", "acb", "bac", "bca", "cba", "cab"]


def test_permutations_cover_all_arrangements():
    text = "abcd"
    result = list(permutations(text))
    expected = {"".join(p) for p in itertools.permutations(text)}
    assert len(result) == len(expected)
    assert set(result) == expected


def test_permutations_empty():
    assert list(permutations("")) == []


@pytest.mark.parametrize("text", ["forgeeksskeegfor", "babad", "cbbd", "aaaa", "x"])
def test_longest_palindrome_properties(text):
    result = longest_palindrome(text)
    assert result == result[::-1]
    assert result in text
    longest = max(
        (text[i:j] for i in range(len(text)) for j in range(i + 1, len(text) + 1)
         if text[i:j] == text[i:j][::-1]),
        key=len,
    )
    assert len(result) == len(longest)


def test_longest_palindrome_known_value():
    assert longest_palindrome("forgeeksskeegfor") == "geeksskeeg"


def test_longest_palindrome_earliest_wins_and_empty():
    assert longest_palindrome("abc") == "a"
    assert longest_palindrome("") == ""


def test_remove_adjacent_duplicates_source_example():
    assert remove_adjacent_duplicates("mississipie") == "mpie"


@pytest.mark.parametrize("text", ["abc", "aabbcc", "abba", "geeksforgeeg"])
def test_remove_adjacent_duplicates_result_has_no_pairs(text):
    result = remove_adjacent_duplicates(text)
    assert all(a != b for a, b in zip(result, result[1:]))
    assert _is_subsequence(result, text)


def test_is_rotated_two_places_both_directions():
    word = "amazon"
    assert is_rotated_two_places(word, word[2:] + word[:2])
    assert is_rotated_two_places(word, word[-2:] + word[:-2])


def test_is_rotated_two_places_rejects_other_rotations():
    word = "abcdef"
    assert not is_rotated_two_places(word, word[1:] + word[:1])
    assert not is_rotated_two_places(word, word + "g")


@pytest.mark.parametrize("number", list(range(1, 4000, 37)) + [4, 9, 40, 90, 400, 900, 3999])
def test_roman_round_trip(number):
    assert roman_to_int(_to_roman(number)) == number


def test_roman_ignores_unknown_characters():
    assert roman_to_int("X?V") == roman_to_int("XV")


def test_is_anagram():
    assert is_anagram("listen", "silent")
    assert not is_anagram("listen", "silents")
    assert not is_anagram("aab", "abb")


def test_longest_common_substring_embedded_core():
    core = "middle"
    first = "xz" + core + "vw"
    second = "qk" + core + "jp"
    assert longest_common_substring(first, second) == len(core)
    assert longest_common_substring(second, first) == len(core)


def test_longest_common_substring_no_overlap():
    assert longest_common_substring("abc", "xyz") == 0
    assert longest_common_substring("", "abc") == 0