from collections import deque

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.stacks import Stacks, push, reverse_rotate, rotate, swap

int_lists = st.lists(st.integers(min_value=-(2**31), max_value=2**31 - 1))


def test_swap_exchanges_top_two():
    stack = deque([1, 2, 3])
    swap(stack)
    assert list(stack) == [2, 1, 3]


@pytest.mark.parametrize("values", [[], [7]])
def test_swap_short_stack_unchanged(values):
    stack = deque(values)
    swap(stack)
    assert list(stack) == values


@given(int_lists)
def test_swap_twice_is_identity(values):
    stack = deque(values)
    swap(stack)
    swap(stack)
    assert list(stack) == values


@given(int_lists)
def test_swap_keeps_tail(values):
    stack = deque(values)
    swap(stack)
    assert list(stack)[2:] == values[2:]
    assert sorted(stack) == sorted(values)


def test_rotate_moves_top_to_bottom():
    stack = deque([1, 2, 3])
    rotate(stack)
    assert list(stack) == [2, 3, 1]


def test_reverse_rotate_moves_bottom_to_top():
    stack = deque([1, 2, 3])
    reverse_rotate(stack)
    assert list(stack) == [3, 1, 2]


@given(int_lists)
def test_rotate_then_reverse_is_identity(values):
    stack = deque(values)
    rotate(stack)
    reverse_rotate(stack)
    assert list(stack) == values


@given(int_lists)
def test_rotate_len_times_is_identity(values):
    stack = deque(values)
    for _ in values:
        rotate(stack)
    assert list(stack) == values


@given(st.lists(st.integers(), min_size=1))
def test_rotate_places_old_top_last(values):
    stack = deque(values)
    rotate(stack)
    assert stack[-1] == values[0]
    assert list(stack)[:-1] == values[1:]


@pytest.mark.parametrize("values", [[], [5]])
def test_rotations_of_short_stack_unchanged(values):
    stack = deque(values)
    rotate(stack)
    reverse_rotate(stack)
    assert list(stack) == values


def test_push_from_empty_does_nothing():
    dest = deque([4])
    src = deque()
    push(dest, src)
    assert list(dest) == [4]
    assert list(src) == []


@given(st.lists(st.integers(), min_size=1), int_lists)
def test_push_moves_top(src_values, dest_values):
    src = deque(src_values)
    dest = deque(dest_values)
    push(dest, src)
    assert dest[0] == src_values[0]
    assert list(dest)[1:] == dest_values
    assert list(src) == src_values[1:]


def test_stacks_initial_state():
    stacks = Stacks([3, 1, 2], [])
    assert list(stacks.a) == [3, 1, 2]
    assert list(stacks.b) == []
    assert stacks.operations == []


def test_stacks_do_not_alias_input():
    values = [1, 2]
    stacks = Stacks(values, [])
    stacks.sa()
    assert values == [1, 2]


@pytest.mark.parametrize(
    "name", ["sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"]
)
def test_every_operation_is_logged(name):
    stacks = Stacks([1, 2, 3], [4, 5, 6])
    getattr(stacks, name)()
    assert stacks.operations == [name]


def test_noop_operations_still_logged():
    stacks = Stacks([], [])
    stacks.pa()
    stacks.sa()
    stacks.rrr()
    assert stacks.operations == ["pa", "sa", "rrr"]
    assert list(stacks.a) == [] and list(stacks.b) == []


@given(int_lists, int_lists)
def test_combined_ops_match_single_ops(a_values, b_values):
    combined = Stacks(a_values, b_values)
    single = Stacks(a_values, b_values)
    combined.ss()
    combined.rr()
    combined.rrr()
    combined.rrr()
    single.sa()
    single.sb()
    single.ra()
    single.rb()
    single.rra()
    single.rrb()
    single.rra()
    single.rrb()
    assert list(combined.a) == list(single.a)
    assert list(combined.b) == list(single.b)


@given(int_lists, int_lists)
def test_operations_preserve_multiset(a_values, b_values):
    stacks = Stacks(a_values, b_values)
    for op in (stacks.pb, stacks.ra, stacks.sb, stacks.rrr, stacks.pa, stacks.ss):
        op()
    assert sorted(list(stacks.a) + list(stacks.b)) == sorted(a_values + b_values)


@given(int_lists)
def test_rb_rrb_on_b_only(values):
    stacks = Stacks([], values)
    stacks.rb()
    stacks.rrb()
    assert list(stacks.b) == values
    assert list(stacks.a) == []


def test_repr_shows_contents():
    stacks = Stacks([1], [2])
    assert repr(stacks) == "Stacks(a=[1], b=[2])"