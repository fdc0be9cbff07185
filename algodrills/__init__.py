"""Classic algorithm exercises on arrays, strings, linked lists, greedy choices,
sorting and dynamic programming."""

__version__ = "0.1.0"

__all__ = [
    "arrays_basic",
    "arrays_more",
    "greedy",
    "linked_list",
    "linked_rotate",
    "dynamic",
    "sorting",
    "text",
]