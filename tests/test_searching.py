import math

import pytest

from dsakit.searching import (
    allocate_books,
    binary_search,
    count_occurrences,
    find_pivot,
    first_occurrence,
    integer_sqrt,
    is_sorted_rotated,
    last_occurrence,
    peak_index,
    precise_sqrt,
    search_rotated,
    search_row_col_sorted,
    search_sorted_matrix,
)

EVEN = [5, 9, 13, 20, 26, 39]
ODD = [2, 12, 18, 25, 56]
DUPS = [0, 0, 1, 1, 2, 2, 2, 2]
GRID = [
    [1, 4, 7, 11, 15],
    [2, 5, 8, 12, 19],
    [3, 6, 9, 16, 22],
    [10, 13, 14, 17, 24],
    [18, 21, 23, 26, 30],
]


def _rotations(items):
    return [items[k:] + items[:k] for k in range(len(items))]


@pytest.mark.parametrize("items", [EVEN, ODD, [7], []])
def test_binary_search_finds_every_element(items):
    for value in items:
        assert binary_search(items, value) == items.index(value)


@pytest.mark.parametrize("missing", [0, 10, 100])
def test_binary_search_missing(missing):
    assert binary_search(EVEN, missing) == -1


@pytest.mark.parametrize("key", [0, 1, 2])
def test_occurrences_match_list_methods(key):
    assert first_occurrence(DUPS, key) == DUPS.index(key)
    assert last_occurrence(DUPS, key) == len(DUPS) - 1 - DUPS[::-1].index(key)
    assert count_occurrences(DUPS, key) == DUPS.count(key)


def test_occurrences_absent():
    assert first_occurrence(DUPS, 5) == -1
    assert last_occurrence(DUPS, 5) == -1
    assert count_occurrences(DUPS, 5) == 0


@pytest.mark.parametrize("items", [[0, 1, 2, 1, 0], [0, 10, 5, 2], [1, 3, 5, 4], [3, 2, 1]])
def test_peak_index_is_maximum(items):
    assert items[peak_index(items)] == max(items)


def test_peak_index_empty():
    with pytest.raises(ValueError):
        peak_index([])


@pytest.mark.parametrize("rotated", _rotations([1, 3, 5, 7, 8]))
def test_find_pivot_points_at_minimum(rotated):
    assert rotated[find_pivot(rotated)] == min(rotated)


def test_find_pivot_source_example():
    data = [7, 9, 10, 5, 6]
    assert data[find_pivot(data)] == 5


@pytest.mark.parametrize("rotated", _rotations([1, 3, 5, 7, 8, 11]))
def test_search_rotated_finds_every_element(rotated):
    for value in rotated:
        assert rotated[search_rotated(rotated, value)] == value
    assert search_rotated(rotated, 4) == -1


def test_search_rotated_empty():
    assert search_rotated([], 3) == -1


def test_integer_sqrt_matches_isqrt():
    for n in range(0, 500):
        assert integer_sqrt(n) == math.isqrt(n)


def test_integer_sqrt_negative():
    with pytest.raises(ValueError):
        integer_sqrt(-1)


@pytest.mark.parametrize("n", [2, 10, 37, 50])
@pytest.mark.parametrize("precision", [0, 3, 6])
def test_precise_sqrt_is_truncated_root(n, precision):
    result = precise_sqrt(n, precision)
    assert result <= math.sqrt(n) + 1e-12
    assert math.sqrt(n) - result < 10 ** -precision


def test_precise_sqrt_perfect_square():
    assert precise_sqrt(49, 4) == 7.0


def test_precise_sqrt_negative_precision():
    with pytest.raises(ValueError):
        precise_sqrt(4, -1)


def test_allocate_books_worked_example():
    assert allocate_books([10, 20, 30, 40], 2) == 60


def test_allocate_books_bounds():
    pages = [12, 34, 67, 90]
    assert allocate_books(pages, 1) == sum(pages)
    assert allocate_books(pages, len(pages)) == max(pages)


def test_allocate_books_too_many_students():
    with pytest.raises(ValueError):
        allocate_books([1, 2], 3)


def test_allocate_books_no_students():
    with pytest.raises(ValueError):
        allocate_books([1, 2], 0)


def test_is_sorted_rotated_source_example():
    assert is_sorted_rotated([3, 4, 5, 1, 2]) is True


@pytest.mark.parametrize("rotated", _rotations([1, 1, 2, 4, 6]))
def test_is_sorted_rotated_all_rotations(rotated):
    assert is_sorted_rotated(rotated) is True


@pytest.mark.parametrize("items", [[2, 1, 3, 4], [3, 1, 2, 5], [1, 3, 2]])
def test_is_sorted_rotated_rejects(items):
    assert is_sorted_rotated(items) is False


def test_search_sorted_matrix():
    matrix = [[1, 3, 5, 7], [10, 11, 16, 20], [23, 30, 34, 60]]
    for row in matrix:
        for value in row:
            assert search_sorted_matrix(matrix, value) is True
    assert search_sorted_matrix(matrix, 13) is False
    assert search_sorted_matrix([], 1) is False


def test_search_row_col_sorted():
    for row in GRID:
        for value in row:
            assert search_row_col_sorted(GRID, value) is True
    assert search_row_col_sorted(GRID, 20) is False
    assert search_row_col_sorted(GRID, 31) is False
    assert search_row_col_sorted([[]], 1) is False