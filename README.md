# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
fixed set of operations. The numbers start on stack `a`, with the first
number on top. The program prints the operations that leave every number
sorted in ascending order on `a`, one per line.

## Operations

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the top element goes to the bottom   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: the bottom element goes to the top |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

An operation that has nothing to act on (swapping a stack with fewer than two
elements, pushing from an empty stack) leaves the stacks unchanged.

## Installation

```
pip install .
```

## Command line

Pass the numbers as separate arguments, or as one space-separated argument:

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

The same entry point can be run as `python -m pushswap.cli`.

With no arguments nothing is printed and the exit status is 0. Input that is
not a whole number, lies outside the 32-bit signed range, repeats a value, or
is a single argument holding no numbers at all makes the command print
`Error` and exit with status 1. Input that is already sorted prints nothing.

## Library

```python
from pushswap.sorting import push_swap
from pushswap.parsing import parse_arguments, InputError
from pushswap.stacks import Stacks

ops = push_swap([3, 2, 1])           # the list of operation names

values = parse_arguments(["5 1 4"])  # [5, 1, 4]; raises InputError on bad input

stacks = Stacks([2, 1], [])
stacks.sa()                          # stacks.a is now deque([1, 2])
stacks.operations                    # ["sa"]
```

Modules:

- `pushswap.stacks` — the free functions `swap`, `push`, `rotate` and
  `reverse_rotate` acting on a `collections.deque` (left end is the top), and
  the `Stacks` class with one method per operation. `Stacks.operations`
  records every operation name applied, so a sequence produced by the sorter
  can be replayed and checked.
- `pushswap.parsing` — `split_words`, `atol_numeric_only`, `validate_stack`
  and `parse_arguments`; invalid input raises `InputError`, a subclass of
  `ValueError`.
- `pushswap.sorting` — `push_swap(values)` returns the operation list;
  `sort_stacks(stacks)` sorts a `Stacks` in place. The cost-based helpers
  (`find_best_rotation`, `apply_rotation`, the `Rotation` dataclass and the
  `cost_*` functions) are available too.
- `pushswap.cli` — `main(argv=None)`, the command-line entry point; it
  returns the exit status.

## Tests

```
pip install ".[test]"
pytest
```