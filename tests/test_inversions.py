from itertools import combinations

import pytest

from algokit.inversions import count_inversions, merge_count


def _pair_inversions(values):
    return sum(1 for a, b in combinations(values, 2) if a > b)


def test_reversed_source_example():
    ordered, count = count_inversions([4, 3, 2, 1])
    assert ordered == [1, 2, 3, 4]
    assert count == 6


@pytest.mark.parametrize(
    "values",
    [
        [3, 5, 34, 10, 8, 7, 1],
        [4, 3, 2, 1],
        [1, 2, 3, 4, 5],
        [2, 2, 1, 1],
        [5],
        [],
        [9, -1, 0, 9, 3, 3, -7, 12],
    ],
)
def test_matches_pairwise_count_and_sorts(values):
    ordered, count = count_inversions(values)
    assert ordered == sorted(values)
    assert count == _pair_inversions(values)


def test_sorted_input_has_no_inversions():
    assert count_inversions(list(range(20)))[1] == 0


def test_equal_elements_are_not_inversions():
    assert count_inversions([7, 7, 7, 7])[1] == 0


def test_input_not_modified():
    values = [3, 1, 2]
    count_inversions(values)
    assert values == [3, 1, 2]


def test_merge_count_combines_and_counts():
    merged, count = merge_count([2, 4, 6], [1, 3, 5])
    assert merged == [1, 2, 3, 4, 5, 6]
    assert count == _pair_inversions([2, 4, 6, 1, 3, 5])


def test_merge_count_with_empty_side():
    assert merge_count([], [1, 2]) == ([1, 2], 0)
    assert merge_count([1, 2], []) == ([1, 2], 0)