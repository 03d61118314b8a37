"""Binary-search based lookups over sorted sequences and matrices."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

__all__ = [
    "binary_search",
    "first_occurrence",
    "last_occurrence",
    "count_occurrences",
    "peak_index",
    "find_pivot",
    "search_rotated",
    "integer_sqrt",
    "precise_sqrt",
    "allocate_books",
    "is_sorted_rotated",
    "search_sorted_matrix",
    "search_row_col_sorted",
]


def _search_range(items: Sequence[int], key: int, start: int, end: int) -> int:
    while start <= end:
        mid = start + (end - start) // 2
        value = items[mid]
        if value == key:
            return mid
        if value > key:
            end = mid - 1
        else:
            start = mid + 1
    return -1


def binary_search(items: Sequence[int], key: int) -> int:
    """Return the index of ``key`` in sorted ``items``, or -1 if absent."""
    return _search_range(items, key, 0, len(items) - 1)


def _occurrence(items: Sequence[int], key: int, leftmost: bool) -> int:
    start, end = 0, len(items) - 1
    found = -1
    while start <= end:
        mid = start + (end - start) // 2
        value = items[mid]
        if value == key:
            found = mid
            if leftmost:
                end = mid - 1
            else:
                start = mid + 1
        elif value < key:
            start = mid + 1
        else:
            end = mid - 1
    return found


def first_occurrence(items: Sequence[int], key: int) -> int:
    """Return the first index of ``key`` in sorted ``items``, or -1."""
    return _occurrence(items, key, leftmost=True)


def last_occurrence(items: Sequence[int], key: int) -> int:
    """Return the last index of ``key`` in sorted ``items``, or -1."""
    return _occurrence(items, key, leftmost=False)


def count_occurrences(items: Sequence[int], key: int) -> int:
    """Return how many times ``key`` appears in sorted ``items``."""
    first = first_occurrence(items, key)
    if first == -1:
        return 0
    return last_occurrence(items, key) - first + 1


def peak_index(items: Sequence[int]) -> int:
    """Return the index of the peak of a mountain sequence."""
    if not items:
        raise ValueError("peak_index() of an empty sequence")
    start, end = 0, len(items) - 1
    while start < end:
        mid = start + (end - start) // 2
        if items[mid] < items[mid + 1]:
            start = mid + 1
        else:
            end = mid
    return start


def find_pivot(items: Sequence[int]) -> int:
    """Return the index of the smallest element of a sorted, rotated sequence."""
    if not items:
        raise ValueError("find_pivot() of an empty sequence")
    if items[0] <= items[-1]:
        return 0
    start, end = 0, len(items) - 1
    while start < end:
        mid = start + (end - start) // 2
        if items[mid] >= items[0]:
            start = mid + 1
        else:
            end = mid
    return start


def search_rotated(items: Sequence[int], key: int) -> int:
    """Return the index of ``key`` in a sorted, rotated sequence, or -1."""
    if not items:
        return -1
    pivot = find_pivot(items)
    last = len(items) - 1
    if items[pivot] <= key <= items[last]:
        return _search_range(items, key, pivot, last)
    return _search_range(items, key, 0, pivot - 1)


def integer_sqrt(n: int) -> int:
    """Return the floor of the square root of a non-negative integer."""
    if n < 0:
        raise ValueError("square root of a negative number")
    start, end = 0, n
    answer = 0
    while start <= end:
        mid = start + (end - start) // 2
        square = mid * mid
        if square == n:
            return mid
        if square > n:
            end = mid - 1
        else:
            answer = mid
            start = mid + 1
    return answer


def precise_sqrt(n: int, precision: int) -> float:
    """Return the square root of ``n`` truncated to ``precision`` decimal places."""
    if precision < 0:
        raise ValueError("precision must be non-negative")
    answer = Decimal(integer_sqrt(n))
    step = Decimal(1)
    for _ in range(precision):
        step /= 10
        while (answer + step) * (answer + step) <= n:
            answer += step
    return float(answer)


def _fits(pages: Sequence[int], students: int, limit: int) -> bool:
    needed = 1
    load = 0
    for count in pages:
        if load + count <= limit:
            load += count
            continue
        needed += 1
        if needed > students or count > limit:
            return False
        load = count
    return True


def allocate_books(pages: Sequence[int], students: int) -> int:
    """Return the smallest possible maximum of pages any one student reads.

    Books are handed out in order, each student receiving a contiguous run.
    """
    if students < 1:
        raise ValueError("at least one student is required")
    if students > len(pages):
        raise ValueError("number of students cannot exceed the number of books")
    start, end = 0, sum(pages)
    answer = -1
    while start <= end:
        mid = start + (end - start) // 2
        if _fits(pages, students, mid):
            answer = mid
            end = mid - 1
        else:
            start = mid + 1
    return answer


def is_sorted_rotated(items: Sequence[int]) -> bool:
    """Tell whether ``items`` is a non-decreasing sequence rotated some amount."""
    if not items:
        return True
    drops = sum(1 for before, after in zip(items, items[1:]) if before > after)
    if items[-1] > items[0]:
        drops += 1
    return drops <= 1


def search_sorted_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Search a matrix whose rows, read in order, form one sorted sequence."""
    if not matrix or not matrix[0]:
        return False
    cols = len(matrix[0])
    start, end = 0, len(matrix) * cols - 1
    while start <= end:
        mid = start + (end - start) // 2
        element = matrix[mid // cols][mid % cols]
        if element == target:
            return True
        if element < target:
            start = mid + 1
        else:
            end = mid - 1
    return False


def search_row_col_sorted(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Search a matrix whose rows and columns are each sorted ascending."""
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        element = matrix[row][col]
        if element == target:
            return True
        if element < target:
            row += 1
        else:
            col -= 1
    return False