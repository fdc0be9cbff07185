import pytest

from algodrills.linked_list import from_values, to_values
from algodrills.linked_rotate import rotate_left, rotate_right


def test_rotate_left_moves_front_to_back():
    head = rotate_left(from_values([1, 2, 3, 4, 5]), 2)
    assert to_values(head) == [3, 4, 5, 1, 2]


def test_rotate_right_moves_back_to_front():
    head = rotate_right(from_values([1, 2, 3, 4, 5]), 2)
    assert to_values(head) == [4, 5, 1, 2, 3]


@pytest.mark.parametrize("k", [1, 2, 3, 4, 5, 6])
def test_left_then_right_round_trip(k):
    values = list(range(10, 17))
    head = rotate_left(from_values(values), k)
    head = rotate_right(head, k)
    assert to_values(head) == values


@pytest.mark.parametrize("k", [1, 2, 3, 4])
def test_left_equals_right_by_complement(k):
    values = [9, 8, 7, 6, 5]
    left = to_values(rotate_left(from_values(values), k))
    right = to_values(rotate_right(from_values(values), len(values) - k))
    assert left == right


@pytest.mark.parametrize("rotate", [rotate_left, rotate_right])
def test_rotation_keeps_all_elements(rotate):
    values = [4, 1, 3, 1, 2]
    head = rotate(from_values(values), 3)
    assert sorted(to_values(head)) == sorted(values)


@pytest.mark.parametrize("rotate", [rotate_left, rotate_right])
def test_zero_and_full_length_are_identity(rotate):
    values = [1, 2, 3]
    assert to_values(rotate(from_values(values), 0)) == values
    assert to_values(rotate(from_values(values), len(values))) == values


@pytest.mark.parametrize("rotate", [rotate_left, rotate_right])
def test_empty_list_stays_empty(rotate):
    assert rotate(None, 3) is None


def test_rotate_right_beyond_length_leaves_list():
    values = [1, 2, 3]
    assert to_values(rotate_right(from_values(values), 7)) == values


def test_rotate_left_beyond_length_raises():
    with pytest.raises(ValueError):
        rotate_left(from_values([1, 2, 3]), 4)


@pytest.mark.parametrize("rotate", [rotate_left, rotate_right])
def test_negative_k_raises(rotate):
    with pytest.raises(ValueError):
        rotate(from_values([1, 2, 3]), -1)


def test_single_node_unchanged():
    assert to_values(rotate_left(from_values([42]), 1)) == [42]
    assert to_values(rotate_right(from_values([42]), 1)) == [42]