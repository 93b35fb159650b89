"""Counting inversions with merge sort."""

from __future__ import annotations

from typing import Sequence


def merge_count(left: Sequence[int], right: Sequence[int]) -> tuple[list[int], int]:
    """Merge two sorted sequences.

    Returns the merged list and the number of pairs (a, b) with ``a`` in
    ``left``, ``b`` in ``right`` and ``a > b``.
    """
    merged: list[int] = []
    inversions = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            inversions += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def count_inversions(values: Sequence[int]) -> tuple[list[int], int]:
    """Sort ``values`` and count its inversions.

    Returns a new sorted list and the number of index pairs i < j with
    ``values[i] > values[j]``. The input is not modified.
    """
    if len(values) <= 1:
        return list(values), 0
    mid = (len(values) - 1) // 2 + 1
    left, left_count = count_inversions(values[:mid])
    right, right_count = count_inversions(values[mid:])
    merged, split_count = merge_count(left, right)
    return merged, left_count + right_count + split_count