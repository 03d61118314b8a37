"""Problems solved with a stack: next greater/smaller, brackets, histograms."""

from __future__ import annotations

from typing import Iterable, Sequence

__all__ = [
    "next_greater_element",
    "has_redundant_brackets",
    "min_reversal_cost",
    "next_smaller_elements",
    "largest_rectangle_area",
    "celebrity",
    "max_rectangle_area",
]

_OPERATORS = "+-*/"


def next_greater_element(queries: Iterable[int], nums: Sequence[int]) -> list[int]:
    """For each query, return the first larger value after it in ``nums``, or -1.

    A query that appears several times in ``nums`` is looked up at its first
    occurrence.
    """
    greater = [-1] * len(nums)
    pending: list[int] = []
    for index, value in enumerate(nums):
        while pending and nums[pending[-1]] < value:
            greater[pending.pop()] = value
        pending.append(index)

    first_index: dict[int, int] = {}
    for index, value in enumerate(nums):
        first_index.setdefault(value, index)

    result = []
    for query in queries:
        if query not in first_index:
            raise ValueError(f"{query!r} does not occur in nums")
        result.append(greater[first_index[query]])
    return result


def has_redundant_brackets(expression: str) -> bool:
    """Tell whether some pair of brackets encloses no operator."""
    pending: list[str] = []
    for ch in expression:
        if ch == "(" or ch in _OPERATORS:
            pending.append(ch)
        elif ch == ")":
            has_operator = False
            while True:
                if not pending:
                    raise ValueError("unbalanced closing bracket")
                top = pending.pop()
                if top == "(":
                    break
                has_operator = True
            if not has_operator:
                return True
    return False


def min_reversal_cost(text: str) -> int:
    """Return how many braces must be flipped to balance ``text``.

    Any character other than ``{`` counts as a closing brace.
    """
    if len(text) % 2:
        raise ValueError("a string of odd length can never be balanced")
    pending: list[str] = []
    for ch in text:
        if ch != "{" and pending and pending[-1] == "{":
            pending.pop()
        else:
            pending.append(ch)
    opens = pending.count("{")
    closes = len(pending) - opens
    return (closes + 1) // 2 + (opens + 1) // 2


def next_smaller_elements(items: Sequence[int]) -> list[int]:
    """For each element, return the first smaller value to its right, or -1."""
    result = [-1] * len(items)
    candidates: list[int] = []
    for index in reversed(range(len(items))):
        value = items[index]
        while candidates and candidates[-1] >= value:
            candidates.pop()
        if candidates:
            result[index] = candidates[-1]
        candidates.append(value)
    return result


def _smaller_indices(heights: Sequence[int], indices: Iterable[int], missing: int) -> list[int]:
    bounds = [missing] * len(heights)
    stack: list[int] = []
    for index in indices:
        while stack and heights[stack[-1]] >= heights[index]:
            stack.pop()
        if stack:
            bounds[index] = stack[-1]
        stack.append(index)
    return bounds


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle that fits under the histogram."""
    n = len(heights)
    if n == 0:
        return 0
    following = _smaller_indices(heights, reversed(range(n)), n)
    preceding = _smaller_indices(heights, range(n), -1)
    return max(
        height * (after - before - 1)
        for height, before, after in zip(heights, preceding, following)
    )


def celebrity(matrix: Sequence[Sequence[int]]) -> int:
    """Return the person everyone knows and who knows no one, or -1.

    ``matrix[a][b]`` is true when person ``a`` knows person ``b``; the
    diagonal is ignored.
    """
    n = len(matrix)
    if n == 0:
        return -1
    candidates = list(range(n))
    while len(candidates) > 1:
        a = candidates.pop()
        b = candidates.pop()
        candidates.append(b if matrix[a][b] else a)
    candidate = candidates[0]
    others = [i for i in range(n) if i != candidate]
    knows_nobody = not any(matrix[candidate][i] for i in others)
    known_by_all = all(matrix[i][candidate] for i in others)
    return candidate if knows_nobody and known_by_all else -1


def max_rectangle_area(matrix: Sequence[Sequence[int]]) -> int:
    """Return the area of the largest all-ones rectangle in a binary matrix."""
    if not matrix:
        return 0
    heights = [0] * len(matrix[0])
    best = 0
    for row in matrix:
        heights = [height + cell if cell else 0 for height, cell in zip(heights, row)]
        best = max(best, largest_rectangle_area(heights))
    return best