"""Character classification and small integer helpers.

Every predicate takes either a one-character string or an integer code
point and works on the ASCII ranges only.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_DELIMITERS = frozenset(" \t\n\v\f\r")


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and decimal digits."""
    return isalpha(c) or isdigit(c)


def isalpha(c: CharLike) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def isascii(c: CharLike) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def isdigit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def isprint(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def isdelim(c: CharLike) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return."""
    return chr(_code(c)) in _DELIMITERS if _code(c) >= 0 else False


def isemptystr(text: str) -> bool:
    """True when the text holds nothing but delimiter characters."""
    return all(ch in _DELIMITERS for ch in text)


def tolower(c: CharLike) -> CharLike:
    """Lower-case an ASCII capital, leaving anything else unchanged."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(c, str) else code


def toupper(c: CharLike) -> CharLike:
    """Upper-case an ASCII small letter, leaving anything else unchanged."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(c, str) else code


def smaller_int(n1: int, n2: int) -> int:
    """Return the smaller of two integers, the first one on a tie."""
    return n1 if n1 <= n2 else n2