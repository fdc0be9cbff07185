"""Rotation of singly linked lists."""

from __future__ import annotations

from algodrills.linked_list import Node


def _tail_and_length(head: Node) -> tuple[Node, int]:
    tail = head
    length = 1
    while tail.next is not None:
        tail = tail.next
        length += 1
    return tail, length


def rotate_left(head: Node | None, k: int) -> Node | None:
    """Move the first ``k`` nodes to the end and return the new head.

    Rotating by zero or by the list's length leaves it unchanged; a ``k``
    longer than the list is an error.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    if head is None or k == 0:
        return head
    tail, length = _tail_and_length(head)
    if k > length:
        raise ValueError(f"cannot rotate a list of {length} nodes by {k}")
    if k == length:
        return head
    split = head
    for _ in range(k - 1):
        split = split.next
    new_head = split.next
    split.next = None
    tail.next = head
    return new_head


def rotate_right(head: Node | None, k: int) -> Node | None:
    """Move the last ``k`` nodes to the front and return the new head.

    When ``k`` is at least the list's length the list is left unchanged.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    if head is None or k == 0:
        return head
    _, length = _tail_and_length(head)
    if k >= length:
        return head
    return rotate_left(head, length - k)