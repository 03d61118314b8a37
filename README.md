# dsakit

A small, dependency-free collection of classic data-structure and algorithm
routines: binary searching, elementary sorts, array and string manipulation,
matrix traversal, stack problems and binary-tree traversal.

All functions work on plain Python lists, strings and nested lists. Functions
that transform a sequence return a new list and leave their input unchanged.

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## Modules

### `dsakit.searching`

- `binary_search(items, key)`: index of `key` in sorted `items`, or -1.
- `first_occurrence(items, key)`, `last_occurrence(items, key)`: first and last
  index of `key` in sorted `items`, or -1.
- `count_occurrences(items, key)`: how many times `key` appears.
- `peak_index(items)`: index of the peak of a mountain sequence
  (`ValueError` if empty).
- `find_pivot(items)`: index of the smallest element of a sorted, rotated
  sequence (0 if not rotated; `ValueError` if empty).
- `search_rotated(items, key)`: index of `key` in a sorted, rotated sequence,
  or -1.
- `integer_sqrt(n)`: floor of the square root (`ValueError` for negative `n`).
- `precise_sqrt(n, precision)`: square root truncated to `precision` decimal
  places, as a float.
- `allocate_books(pages, students)`: smallest possible maximum number of pages
  any student reads when books are handed out in contiguous runs
  (`ValueError` if there are no students or more students than books).
- `is_sorted_rotated(items)`: whether `items` is a non-decreasing sequence
  rotated by some amount.
- `search_sorted_matrix(matrix, target)`: search a matrix whose rows, read in
  order, form one sorted sequence.
- `search_row_col_sorted(matrix, target)`: search a matrix whose rows and
  columns are each sorted ascending.

### `dsakit.sorting`

- `selection_sort(items)`, `insertion_sort(items)`: return a new sorted list.
- `bubble_sort(items)`: returns a `BubbleSortResult` named tuple of
  `items` (the sorted list) and `swaps` (the number of swaps made). It stops
  early once a pass makes no swap.

### `dsakit.arrays`

- `single_number(items)`: the value left over when all others pair up (XOR of
  all items).
- `reverse_after(items, position)`: copy with the elements after index
  `position` reversed.
- `merge_sorted(first, second)`: merge two sorted sequences.
- `move_zeroes(items)`: copy with zeros moved to the end, others kept in order.
- `rotate(items, k)`: copy rotated `k` places to the right.
- `add_digit_arrays(first, second)`: add two numbers given as
  most-significant-first lists of decimal digits (`ValueError` for a
  non-digit).

### `dsakit.strings`

- `reverse_string(text)`
- `is_palindrome(text)`: ignores case and non-alphanumeric characters.
- `letter_frequencies(text)`: case-insensitive counts of all 26 ASCII letters.
- `max_occurring_char(text)`: most frequent letter; ties go to the earlier
  letter.
- `replace_spaces(text)`: every space becomes `@40`.
- `remove_occurrences(text, part)`: repeatedly removes the leftmost occurrence
  of `part` (`ValueError` if `part` is empty).
- `check_inclusion(pattern, text)`: whether some window of `text` is a
  permutation of `pattern`.
- `remove_adjacent_duplicates(text)`: removes pairs of equal adjacent
  characters until none remain.
- `compress_letters(text)`: each letter present followed by its count, in
  alphabetical order, e.g. `"aabcc"` gives `"a2b1c2"` (`ValueError` for
  anything but lowercase letters).

### `dsakit.matrix`

- `largest_row_sum(matrix)`: index of the row with the largest sum; ties go
  to the first.
- `wave_order(matrix)`: columns left to right, alternately top-down and
  bottom-up.
- `spiral_order(matrix)`: clockwise spiral from the top-left.
- `rotate_clockwise(matrix)`: new matrix rotated a quarter turn clockwise.

### `dsakit.trees`

- `Node(value, left=None, right=None)`: a binary tree node (dataclass).
- `inorder(root)`, `preorder(root)`, `postorder(root)`: lists of values.
- `level_order(root)`: values grouped by depth, each level left to right.

### `dsakit.stacks`

A stack here is a list whose last element is the top.

- `push_at_bottom(stack, value)`, `reverse_stack(stack)`,
  `delete_middle(stack)`, `sort_stack(stack)`: return a new list.
  `delete_middle` removes the element `len(stack) // 2` places below the top
  (`IndexError` if empty); `sort_stack` puts the largest element on top.
- `NStack(count, capacity)`: `count` stacks sharing one array of `capacity`
  slots. `push(value, stack_number)` and `pop(stack_number)` number stacks
  from 1. Pushing when every slot is used raises `OverflowError`, popping an
  empty stack raises `IndexError`, and a bad stack number raises `ValueError`.

### `dsakit.stack_problems`

- `next_greater_element(queries, nums)`: for each query, the first larger
  value after it in `nums`, or -1 (`ValueError` if a query is not in `nums`).
- `has_redundant_brackets(expression)`: whether some bracket pair encloses no
  `+ - * /` operator.
- `min_reversal_cost(text)`: braces to flip to balance `text`
  (`ValueError` for odd length).
- `next_smaller_elements(items)`: first smaller value to the right, or -1.
- `largest_rectangle_area(heights)`: largest rectangle under a histogram.
- `celebrity(matrix)`: the person everyone knows and who knows no one, or -1.
- `max_rectangle_area(matrix)`: largest all-ones rectangle in a binary matrix.

## Examples

```python
from dsakit.searching import binary_search, allocate_books
from dsakit.sorting import bubble_sort
from dsakit.arrays import add_digit_arrays
from dsakit.matrix import spiral_order
from dsakit.stack_problems import largest_rectangle_area
from dsakit.trees import Node, level_order

binary_search([5, 9, 13, 20, 26, 39], 9)         # 1
allocate_books([10, 20, 30, 40], 2)               # 60
bubble_sort([3, 1, 2]).items                      # [1, 2, 3]
add_digit_arrays([1, 2, 3], [9, 9])               # [2, 2, 2]
spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])   # [1, 2, 3, 6, 9, 8, 7, 4, 5]
largest_rectangle_area([2, 1, 5, 6, 2, 3])        # 10

root = Node(1, Node(2), Node(3))
level_order(root)                                 # [[1], [2, 3]]
```

Several stacks can share one fixed-size pool:

```python
from dsakit.stacks import NStack

stacks = NStack(3, 10)
stacks.push(10, 1)
stacks.push(20, 1)
stacks.pop(1)   # 20
```

## What it does not do

dsakit is a library only: it has no command-line tool and reads no input of
its own. Callers pass in the data and print or use the results themselves.