"""Turning command-line words into a validated list of integers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)
INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


class InputError(ValueError):
    """Raised when the program's arguments do not describe a valid stack."""


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def atol_numeric_only(text: str) -> int:
    """Read a signed decimal integer made of digits only.

    Leading spaces and one sign are allowed. Anything that is not a clean
    number, or that overflows a signed 64-bit value, comes back as
    ``LONG_MAX`` (or ``LONG_MIN`` when a minus sign was seen), values that
    the later range check rejects.
    """
    if not text:
        return LONG_MAX
    rest = text.lstrip(" ")
    sign = -1 if rest.startswith("-") else 1
    if rest[:1] in ("+", "-"):
        rest = rest[1:]
    if not rest:
        return LONG_MAX
    result = 0
    for char in rest:
        if not ("0" <= char <= "9"):
            return LONG_MAX if sign == 1 else LONG_MIN
        digit = ord(char) - ord("0")
        if result > (LONG_MAX - digit) // 10:
            return LONG_MAX if sign == 1 else LONG_MIN
        result = result * 10 + digit
    return result * sign


def validate_stack(values: Iterable[int]) -> None:
    """Raise :class:`InputError` for a value outside 32-bit range or a duplicate."""
    seen: set[int] = set()
    for value in values:
        if value > INT_MAX or value < INT_MIN:
            raise InputError(f"value out of range: {value}")
        if value in seen:
            raise InputError(f"duplicate value: {value}")
        seen.add(value)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Build the initial stack from the program's arguments.

    A single argument is split on spaces; several arguments are taken one
    number each. No arguments gives an empty stack.
    """
    if not args:
        return []
    if len(args) == 1:
        words = split_words(args[0], " ")
        if not words:
            raise InputError("no numbers given")
    else:
        words = list(args)
    values = [atol_numeric_only(word) for word in words]
    validate_stack(values)
    return values