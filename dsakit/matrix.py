"""Traversals and transforms of rectangular integer matrices."""

from __future__ import annotations

from typing import Sequence

__all__ = ["largest_row_sum", "wave_order", "spiral_order", "rotate_clockwise"]

Matrix = Sequence[Sequence[int]]


def largest_row_sum(matrix: Matrix) -> int:
    """Return the index of the row with the largest sum; ties go to the first."""
    if not matrix:
        raise ValueError("largest_row_sum() of an empty matrix")
    sums = [sum(row) for row in matrix]
    return sums.index(max(sums))


def wave_order(matrix: Matrix) -> list[int]:
    """Read columns left to right, alternately top-down and bottom-up."""
    if not matrix:
        return []
    result: list[int] = []
    for col, column in enumerate(zip(*matrix)):
        result.extend(reversed(column) if col % 2 else column)
    return result


def spiral_order(matrix: Matrix) -> list[int]:
    """Read the matrix in clockwise spiral order starting at the top-left."""
    if not matrix or not matrix[0]:
        return []
    result: list[int] = []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    total = len(matrix) * len(matrix[0])
    while len(result) < total:
        for col in range(left, right + 1):
            result.append(matrix[top][col])
        top += 1
        for row in range(top, bottom + 1):
            result.append(matrix[row][right])
        right -= 1
        if top <= bottom:
            for col in range(right, left - 1, -1):
                result.append(matrix[bottom][col])
            bottom -= 1
        if left <= right:
            for row in range(bottom, top - 1, -1):
                result.append(matrix[row][left])
            left += 1
    return result[:total]


def rotate_clockwise(matrix: Matrix) -> list[list[int]]:
    """Return a new matrix rotated a quarter turn clockwise."""
    return [list(row) for row in zip(*reversed(matrix))]