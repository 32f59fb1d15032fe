"""Conversions between decimal text and 32-bit integers."""

from __future__ import annotations

import re

_INT_BITS = 32
_PATTERN = re.compile(r"[ \t\n\v\f\r]*([+-]*)([0-9]*)")


def _wrap(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped. A sign must be followed directly by a digit,
    otherwise the result is 0; text with no digits also yields 0. Parsing stops at
    the first non-digit and the result wraps like a 32-bit signed integer.
    """
    match = _PATTERN.match(text)
    signs, digits = match.group(1), match.group(2)
    if len(signs) > 1 or (signs and not digits):
        return 0
    value = int(digits) if digits else 0
    if signs == "-":
        value = -value
    return _wrap(value)


def itoa(n: int) -> str:
    """Render an integer as decimal text."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return f"{n:d}"