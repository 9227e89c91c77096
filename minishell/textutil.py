"""Small text helpers with the exact semantics the shell relies on."""

from __future__ import annotations

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_WHITESPACE = " \t\n\v\f\r"


def atoi(text: str) -> int:
    """Parse a leading integer the way the shell's exit builtin expects.

    Leading whitespace is skipped and at most one sign is accepted; a second
    sign yields 0. Digits are read until the first non-digit. A value that
    does not fit in a 32-bit signed integer yields 0.
    """
    if text is None:
        return 0
    rest = text.lstrip(_WHITESPACE)
    sign = 0
    while rest[:1] in ("-", "+") and rest:
        if sign != 0:
            return 0
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    if sign == 0:
        sign = 1
    digits = []
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    magnitude = int("".join(digits)) if digits else 0
    value = magnitude * sign
    if value == INT_MIN:
        return INT_MIN
    if magnitude > INT_MAX:
        return 0
    return value


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty fields."""
    if text is None:
        raise ValueError("cannot split None")
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [part for part in text.split(sep) if part]