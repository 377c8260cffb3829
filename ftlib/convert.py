"""Conversions between decimal text and fixed-width integers."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _wrap(value: int, bits: int) -> int:
    """Reduce an integer to the signed range of the given width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _parse(text: str) -> int:
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    negative = False
    if pos < length and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    result = 0
    while pos < length and "0" <= text[pos] <= "9":
        result = result * 10 + (ord(text[pos]) - 48)
        pos += 1
    return -result if negative else result


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit signed value.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit. Text with no digits gives 0. Values out of range
    wrap around.
    """
    return _wrap(_parse(text), 32)


def atol(text: str) -> int:
    """Parse a leading decimal integer as a 64-bit signed value."""
    return _wrap(_parse(text), 64)


def itoa(n: int) -> str:
    """Format a 32-bit signed integer as decimal text."""
    return str(_wrap(int(n), 32))