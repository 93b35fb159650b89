"""Binary search and longest-common-prefix helpers."""

from __future__ import annotations

from typing import Sequence


def binary_search(values: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in the sorted ``values``, or -1 if absent.

    When the target occurs several times, the index of whichever copy the
    search lands on first is returned.
    """
    left, right = 0, len(values) - 1
    while left <= right:
        mid = left + (right - left) // 2
        current = values[mid]
        if current == target:
            return mid
        if current > target:
            right = mid - 1
        else:
            left = mid + 1
    return -1


def common_prefix(first: str, second: str) -> str:
    """Return the longest prefix shared by two strings."""
    for index, (a, b) in enumerate(zip(first, second)):
        if a != b:
            return first[:index]
    return first[: min(len(first), len(second))]


def longest_common_prefix(strings: Sequence[str]) -> str:
    """Return the longest prefix shared by all strings, reducing left to right."""
    if not strings:
        return ""
    prefix = strings[0]
    for other in strings[1:]:
        prefix = common_prefix(prefix, other)
        if not prefix:
            return ""
    return prefix


def divide_longest_common_prefix(strings: Sequence[str]) -> str:
    """Return the longest common prefix by splitting the list in halves."""
    if not strings:
        return ""

    def solve(low: int, high: int) -> str:
        if low == high:
            return strings[low]
        mid = (low + high) // 2
        return common_prefix(solve(low, mid), solve(mid + 1, high))

    return solve(0, len(strings) - 1)