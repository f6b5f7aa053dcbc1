"""Cost-driven sort of stack ``a`` using stack ``b`` as scratch space."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .stacks import Stacks


@dataclass(frozen=True)
class Rotation:
    """Rotations needed to bring ``nbr`` to the top of the source stack and
    the matching insertion point to the top of the destination stack.

    Positive counts rotate upwards, negative counts rotate downwards.
    """

    nbr: int
    cost: int
    dest_rt: int
    src_rt: int


def is_sorted(stack: Iterable[int]) -> bool:
    """True if the stack reads in non-decreasing order from the top."""
    items = list(stack)
    return all(x <= y for x, y in zip(items, items[1:]))


def find_index(stack: Sequence[int], nbr: int) -> int:
    """Position of ``nbr`` counted from the top of the stack."""
    return stack.index(nbr)


def find_best_dest(dest: Sequence[int], nbr: int, asc: bool) -> int:
    """Position in ``dest`` that should be on top before ``nbr`` is pushed onto it.

    For ``asc`` the stack is kept in ascending cyclic order, otherwise in
    descending cyclic order. Zero means between the last and first element.
    """
    low, high = min(dest), max(dest)
    if nbr < low or nbr > high:
        return find_index(dest, low if asc else high)
    items = list(dest)
    for i, (prev, later) in enumerate(zip(items, items[1:]), start=1):
        if (asc and prev < nbr < later) or (not asc and prev > nbr > later):
            return i
    return 0


def cost_rdrs(dest: Sequence[int], src: Sequence[int], nbr: int, asc: bool) -> Rotation:
    """Both stacks rotated upwards."""
    dest_rt = find_best_dest(dest, nbr, asc)
    src_rt = find_index(src, nbr)
    return Rotation(nbr, max(dest_rt, src_rt), dest_rt, src_rt)


def cost_rrdrrs(dest: Sequence[int], src: Sequence[int], nbr: int, asc: bool) -> Rotation:
    """Both stacks rotated downwards."""
    dest_rt = find_best_dest(dest, nbr, asc) - len(dest)
    src_rt = find_index(src, nbr) - len(src)
    return Rotation(nbr, max(abs(dest_rt), abs(src_rt)), dest_rt, src_rt)


def cost_rdrrs(dest: Sequence[int], src: Sequence[int], nbr: int, asc: bool) -> Rotation:
    """Destination rotated upwards, source downwards."""
    dest_rt = find_best_dest(dest, nbr, asc)
    src_rt = find_index(src, nbr) - len(src)
    return Rotation(nbr, abs(dest_rt) + abs(src_rt), dest_rt, src_rt)


def cost_rrdrs(dest: Sequence[int], src: Sequence[int], nbr: int, asc: bool) -> Rotation:
    """Destination rotated downwards, source upwards."""
    dest_rt = find_best_dest(dest, nbr, asc) - len(dest)
    src_rt = find_index(src, nbr)
    return Rotation(nbr, abs(dest_rt) + abs(src_rt), dest_rt, src_rt)


_COST_FUNCTIONS = (cost_rdrs, cost_rrdrrs, cost_rdrrs, cost_rrdrs)


def find_best_rotation(dest: Sequence[int], src: Sequence[int], asc: bool) -> Rotation:
    """Cheapest rotation over every element of ``src`` and every direction pair.

    Ties keep the first candidate found.
    """
    best: Rotation | None = None
    for nbr in src:
        for cost_of in _COST_FUNCTIONS:
            candidate = cost_of(dest, src, nbr, asc)
            if best is None or candidate.cost < best.cost:
                best = candidate
    if best is None:
        raise ValueError("source stack is empty")
    return best


def apply_rotation(stacks: Stacks, best: Rotation, asc: bool) -> None:
    """Perform the rotations of ``best``.

    With ``asc`` the destination is ``a`` and the source ``b``; otherwise
    the other way round. Shared rotations use ``rr``/``rrr``.
    """
    d, s = best.dest_rt, best.src_rt
    while d > 0 and s > 0:
        stacks.rr()
        d -= 1
        s -= 1
    while d < 0 and s < 0:
        stacks.rrr()
        d += 1
        s += 1
    a_rt, b_rt = (d, s) if asc else (s, d)
    for _ in range(max(a_rt, 0)):
        stacks.ra()
    for _ in range(max(b_rt, 0)):
        stacks.rb()
    for _ in range(max(-a_rt, 0)):
        stacks.rra()
    for _ in range(max(-b_rt, 0)):
        stacks.rrb()


def sort_three(stacks: Stacks) -> None:
    """Sort ``a`` when it holds exactly three elements."""
    a = stacks.a
    if len(a) != 3:
        return
    largest = max(a)
    if a[0] == largest:
        stacks.ra()
    elif a[1] == largest:
        stacks.rra()
    if a[0] > a[1]:
        stacks.sa()


def push_to_b_until_three(stacks: Stacks) -> None:
    """Move elements to ``b`` in descending cyclic order until ``a`` has three."""
    for _ in range(2):
        if len(stacks.a) > 3 and not is_sorted(stacks.a):
            stacks.pb()
    while len(stacks.a) > 3 and not is_sorted(stacks.a):
        best = find_best_rotation(stacks.b, stacks.a, False)
        apply_rotation(stacks, best, False)
        stacks.pb()
    if not is_sorted(stacks.a):
        sort_three(stacks)


def push_back_to_a(stacks: Stacks) -> None:
    """Return every element of ``b`` to its place in ``a``, then bring the minimum to the top."""
    while stacks.b:
        best = find_best_rotation(stacks.a, stacks.b, True)
        apply_rotation(stacks, best, True)
        stacks.pa()
    smallest = min(stacks.a)
    if find_index(stacks.a, smallest) < len(stacks.a) // 2:
        while stacks.a[0] != smallest:
            stacks.ra()
    else:
        while stacks.a[0] != smallest:
            stacks.rra()


def sort_stacks(stacks: Stacks) -> None:
    """Sort ``a`` in ascending order from the top."""
    if not stacks.a or is_sorted(stacks.a):
        return
    size = len(stacks.a)
    if size == 2:
        stacks.sa()
    if size == 3:
        sort_three(stacks)
    else:
        push_to_b_until_three(stacks)
        push_back_to_a(stacks)


def push_swap(values: Iterable[int]) -> list[str]:
    """The list of operations that sorts ``values``."""
    stacks = Stacks(values)
    sort_stacks(stacks)
    return list(stacks.operations)