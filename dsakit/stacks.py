"""Recursive-style stack exercises and several stacks sharing one array.

A stack is given as a list whose last element is the top.
"""

from __future__ import annotations

from typing import Sequence

__all__ = [
    "push_at_bottom",
    "reverse_stack",
    "delete_middle",
    "sort_stack",
    "NStack",
]


def push_at_bottom(stack: Sequence[int], value: int) -> list[int]:
    """Return a copy of ``stack`` with ``value`` placed beneath every element."""
    return [value, *stack]


def reverse_stack(stack: Sequence[int]) -> list[int]:
    """Return a copy of ``stack`` with its order reversed, top becoming bottom."""
    return list(reversed(stack))


def delete_middle(stack: Sequence[int]) -> list[int]:
    """Return a copy of ``stack`` without its middle element.

    The middle is the element ``len(stack) // 2`` places below the top.
    """
    if not stack:
        raise IndexError("delete_middle() of an empty stack")
    data = list(stack)
    del data[len(data) - 1 - len(data) // 2]
    return data


def sort_stack(stack: Sequence[int]) -> list[int]:
    """Return a copy of ``stack`` sorted so that the largest element is on top."""
    return sorted(stack)


class NStack:
    """Several stacks sharing one fixed-size array through a free list."""

    def __init__(self, count: int, capacity: int) -> None:
        if count < 1:
            raise ValueError("at least one stack is required")
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._values = [0] * capacity
        self._tops = [-1] * count
        self._next = [*range(1, capacity), -1]
        self._free = 0

    def _stack_index(self, stack_number: int) -> int:
        if not 1 <= stack_number <= len(self._tops):
            raise ValueError(
                f"stack number must be between 1 and {len(self._tops)}, got {stack_number}"
            )
        return stack_number - 1

    def push(self, value: int, stack_number: int) -> None:
        """Push ``value`` onto stack ``stack_number`` (counted from 1)."""
        index = self._stack_index(stack_number)
        if self._free == -1:
            raise OverflowError("no free slot left")
        slot = self._free
        self._free = self._next[slot]
        self._values[slot] = value
        self._next[slot] = self._tops[index]
        self._tops[index] = slot

    def pop(self, stack_number: int) -> int:
        """Remove and return the top of stack ``stack_number`` (counted from 1)."""
        index = self._stack_index(stack_number)
        slot = self._tops[index]
        if slot == -1:
            raise IndexError(f"pop from empty stack {stack_number}")
        self._tops[index] = self._next[slot]
        self._next[slot] = self._free
        self._free = slot
        return self._values[slot]