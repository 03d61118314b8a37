"""Small array manipulation routines."""

from __future__ import annotations

import heapq
from functools import reduce
from operator import xor
from typing import Iterable, Sequence

__all__ = [
    "single_number",
    "reverse_after",
    "merge_sorted",
    "move_zeroes",
    "rotate",
    "add_digit_arrays",
]


def single_number(items: Iterable[int]) -> int:
    """Return the one value that appears an odd number of times when all others pair up."""
    return reduce(xor, items, 0)


def reverse_after(items: Sequence[int], position: int) -> list[int]:
    """Return a copy with the elements after index ``position`` reversed."""
    head = list(items[: position + 1])
    tail = list(items[position + 1:])
    return head + tail[::-1]


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list."""
    return list(heapq.merge(first, second))


def move_zeroes(items: Iterable[int]) -> list[int]:
    """Return a copy with every zero moved to the end, keeping the others in order."""
    data = list(items)
    nonzero = [value for value in data if value != 0]
    return nonzero + [0] * (len(data) - len(nonzero))


def rotate(items: Sequence[int], k: int) -> list[int]:
    """Return a copy rotated ``k`` places to the right."""
    data = list(items)
    if not data:
        return data
    shift = k % len(data)
    return data[-shift:] + data[:-shift] if shift else data


def add_digit_arrays(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Add two numbers given as most-significant-first lists of decimal digits."""
    for digit in (*first, *second):
        if not 0 <= digit <= 9:
            raise ValueError(f"not a decimal digit: {digit!r}")
    result: list[int] = []
    carry = 0
    a, b = list(reversed(first)), list(reversed(second))
    for i in range(max(len(a), len(b))):
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        carry, digit = divmod(total, 10)
        result.append(digit)
    while carry:
        carry, digit = divmod(carry, 10)
        result.append(digit)
    result.reverse()
    return result