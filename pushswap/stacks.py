"""The two stacks of the puzzle and the eleven operations allowed on them.

The top of a stack is the left end of its deque.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def swap(stack: deque[int]) -> None:
    """Exchange the two topmost elements; do nothing if there are fewer than two."""
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def push(dest: deque[int], src: deque[int]) -> None:
    """Move the top element of ``src`` onto ``dest``; do nothing if ``src`` is empty."""
    if src:
        dest.appendleft(src.popleft())


def rotate(stack: deque[int]) -> None:
    """Move the top element to the bottom."""
    if len(stack) >= 2:
        stack.rotate(-1)


def reverse_rotate(stack: deque[int]) -> None:
    """Move the bottom element to the top."""
    if len(stack) >= 2:
        stack.rotate(1)


class Stacks:
    """Stacks ``a`` and ``b`` together with the log of operations applied to them.

    Every operation is logged by name, even when it leaves the stacks
    unchanged, so the log is exactly the instruction list the program emits.
    """

    def __init__(self, a: Iterable[int] = (), b: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(a)
        self.b: deque[int] = deque(b)
        self.operations: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _log(self, name: str) -> None:
        self.operations.append(name)

    def sa(self) -> None:
        """Swap the top two elements of ``a``."""
        swap(self.a)
        self._log("sa")

    def sb(self) -> None:
        """Swap the top two elements of ``b``."""
        swap(self.b)
        self._log("sb")

    def ss(self) -> None:
        """``sa`` and ``sb`` at once."""
        swap(self.a)
        swap(self.b)
        self._log("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        push(self.a, self.b)
        self._log("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        push(self.b, self.a)
        self._log("pb")

    def ra(self) -> None:
        """Rotate ``a`` upwards."""
        rotate(self.a)
        self._log("ra")

    def rb(self) -> None:
        """Rotate ``b`` upwards."""
        rotate(self.b)
        self._log("rb")

    def rr(self) -> None:
        """``ra`` and ``rb`` at once."""
        rotate(self.a)
        rotate(self.b)
        self._log("rr")

    def rra(self) -> None:
        """Rotate ``a`` downwards."""
        reverse_rotate(self.a)
        self._log("rra")

    def rrb(self) -> None:
        """Rotate ``b`` downwards."""
        reverse_rotate(self.b)
        self._log("rrb")

    def rrr(self) -> None:
        """``rra`` and ``rrb`` at once."""
        reverse_rotate(self.a)
        reverse_rotate(self.b)
        self._log("rrr")