import pytest

from dsakit.stacks import (
    NStack,
    delete_middle,
    push_at_bottom,
    reverse_stack,
    sort_stack,
)


def test_push_at_bottom_places_value_first():
    stack = [7, 1, 4, 5]
    result = push_at_bottom(stack, 9)
    assert result == [9, 7, 1, 4, 5]
    assert stack == [7, 1, 4, 5]


def test_push_at_bottom_on_empty():
    assert push_at_bottom([], 3) == [3]


def test_reverse_stack():
    stack = [1, 4, 0, 8, 2, 0, 0, 5]
    assert reverse_stack(stack) == [5, 0, 0, 2, 8, 0, 4, 1]
    assert reverse_stack(reverse_stack(stack)) == stack


def test_reverse_empty_stack():
    assert reverse_stack([]) == []


def test_delete_middle_odd():
    assert delete_middle([1, 2, 3, 4, 5]) == [1, 2, 4, 5]


def test_delete_middle_even_counts_from_top():
    assert delete_middle([1, 2, 3, 4]) == [1, 3, 4]


def test_delete_middle_single():
    assert delete_middle([42]) == []


def test_delete_middle_empty_raises():
    with pytest.raises(IndexError):
        delete_middle([])


def test_sort_stack_puts_largest_on_top():
    stack = [3, -7, 9, -2, 5]
    result = sort_stack(stack)
    assert result == [-7, -2, 3, 5, 9]
    assert result[-1] == max(stack)


def test_sort_stack_keeps_duplicates():
    stack = [2, 2, 1, 2]
    result = sort_stack(stack)
    assert sorted(result) == result
    assert len(result) == len(stack)


def test_nstack_source_scenario():
    st = NStack(3, 10)
    st.push(10, 1)
    st.push(20, 1)
    st.push(30, 2)
    st.push(40, 3)
    assert st.pop(1) == 20
    assert st.pop(2) == 30
    assert st.pop(3) == 40
    assert st.pop(1) == 10
    with pytest.raises(IndexError):
        st.pop(1)
    st.push(50, 2)
    st.push(60, 2)
    assert st.pop(2) == 60
    assert st.pop(2) == 50


def test_nstack_full_then_reuse_slot():
    st = NStack(2, 3)
    st.push(1, 1)
    st.push(2, 2)
    st.push(3, 1)
    with pytest.raises(OverflowError):
        st.push(4, 2)
    assert st.pop(1) == 3
    st.push(4, 2)
    assert st.pop(2) == 4
    assert st.pop(2) == 2
    assert st.pop(1) == 1


@pytest.mark.parametrize("number", [0, 3, -1])
def test_nstack_rejects_bad_stack_number(number):
    st = NStack(2, 4)
    with pytest.raises(ValueError):
        st.push(1, number)
    with pytest.raises(ValueError):
        st.pop(number)


@pytest.mark.parametrize("count, capacity", [(0, 5), (2, 0)])
def test_nstack_rejects_bad_sizes(count, capacity):
    with pytest.raises(ValueError):
        NStack(count, capacity)