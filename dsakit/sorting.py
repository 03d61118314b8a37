"""Elementary comparison sorts."""

from __future__ import annotations

from typing import Iterable, NamedTuple

__all__ = ["BubbleSortResult", "selection_sort", "bubble_sort", "insertion_sort"]


class BubbleSortResult(NamedTuple):
    """Sorted items together with the number of swaps bubble sort made."""

    items: list[int]
    swaps: int


def selection_sort(items: Iterable[int]) -> list[int]:
    """Return a new list with ``items`` sorted by selection sort."""
    data = list(items)
    for i in range(len(data) - 1):
        smallest = min(range(i, len(data)), key=data.__getitem__)
        data[i], data[smallest] = data[smallest], data[i]
    return data


def bubble_sort(items: Iterable[int]) -> BubbleSortResult:
    """Sort by bubble sort, stopping early once a pass makes no swap."""
    data = list(items)
    swaps = 0
    for done in range(len(data)):
        swapped = False
        for j in range(len(data) - done - 1):
            if data[j] > data[j + 1]:
                data[j], data[j + 1] = data[j + 1], data[j]
                swaps += 1
                swapped = True
        if not swapped:
            break
    return BubbleSortResult(data, swaps)


def insertion_sort(items: Iterable[int]) -> list[int]:
    """Return a new list with ``items`` sorted by insertion sort."""
    data = list(items)
    for i in range(1, len(data)):
        current = data[i]
        j = i - 1
        while j >= 0 and data[j] > current:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = current
    return data