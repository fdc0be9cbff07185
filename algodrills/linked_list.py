"""Singly linked list exercises."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, repr=False)
class Node:
    """A singly linked list node; nodes compare by identity."""

    data: Any
    next: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


def from_values(values: Iterable[Any]) -> Node | None:
    """Build a list from ``values`` and return its head (``None`` when empty)."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_values(head: Node | None) -> list[Any]:
    """Return the data of every node; raise ``ValueError`` if the list loops."""
    seen: set[int] = set()
    values: list[Any] = []
    node = head
    while node is not None:
        if id(node) in seen:
            raise ValueError("list contains a loop")
        seen.add(id(node))
        values.append(node.data)
        node = node.next
    return values


def middle(head: Node | None) -> Any:
    """Return the middle node's data (the second middle for even lengths)."""
    if head is None:
        return None
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
    return slow.data


def reverse(head: Node | None) -> Node | None:
    """Reverse the list in place and return the new head."""
    previous: Node | None = None
    node = head
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous


def _meeting_point(head: Node | None) -> Node | None:
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return slow
    return None


def has_loop(head: Node | None) -> bool:
    """Return whether following ``next`` from ``head`` ever revisits a node."""
    return _meeting_point(head) is not None


def remove_loop(head: Node | None) -> None:
    """Cut the loop, if any, so that the list ends at its last distinct node."""
    meet = _meeting_point(head)
    if meet is None:
        return
    first = head
    last = meet
    if first is meet:
        while last.next is not head:
            last = last.next
    else:
        while first.next is not last.next:
            first = first.next
            last = last.next
    last.next = None


def nth_from_end(head: Node | None, n: int) -> Any:
    """Return the data of the n-th node from the end (1-based), or ``None``."""
    if n < 1:
        raise ValueError("n must be at least 1")
    lead = head
    for _ in range(n):
        if lead is None:
            return None
        lead = lead.next
    trail = head
    while lead is not None:
        lead = lead.next
        trail = trail.next
    return trail.data


def _length(head: Node | None) -> int:
    count = 0
    while head is not None:
        count += 1
        head = head.next
    return count


def intersection_point(head1: Node | None, head2: Node | None) -> Any:
    """Return the data of the first node both lists share, or ``None``."""
    p, q = head1, head2
    len_p, len_q = _length(p), _length(q)
    for _ in range(len_p - len_q):
        p = p.next
    for _ in range(len_q - len_p):
        q = q.next
    while p is not None and q is not None and p is not q:
        p = p.next
        q = q.next
    if p is None or q is None:
        return None
    return p.data


def pairwise_swap(head: Node | None) -> Node | None:
    """Swap the data of each adjacent pair of nodes in place; return ``head``."""
    node = head
    while node is not None and node.next is not None:
        node.data, node.next.data = node.next.data, node.data
        node = node.next.next
    return head