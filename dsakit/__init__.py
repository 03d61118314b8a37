"""Classic data-structure and algorithm routines: searching, sorting, arrays,
strings, matrices, stacks and binary trees."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "matrix",
    "searching",
    "sorting",
    "stack_problems",
    "stacks",
    "strings",
    "trees",
]