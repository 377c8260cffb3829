"""Searching, comparing, copying and joining strings.

Functions that report a position inside a string return the matching
suffix (or ``None``) where the classic interface would hand back a
pointer, and an index where it would hand back a number.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple, Union

CharLike = Union[str, int]

_NUL = "\0"


def _char(c: CharLike) -> str:
    """Normalise a one-character string or a byte value to a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def strlen(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def strchr(text: Optional[str], c: CharLike) -> Optional[str]:
    """Return the suffix of ``text`` starting at the first ``c``.

    Searching for the NUL character finds the terminating position and
    gives an empty string. Returns ``None`` when ``c`` is absent or
    ``text`` is ``None``.
    """
    if text is None:
        return None
    ch = _char(c)
    if ch == _NUL:
        return ""
    pos = text.find(ch)
    return None if pos < 0 else text[pos:]


def strrchr(text: str, c: CharLike) -> Optional[str]:
    """Return the suffix of ``text`` starting at the last ``c``, or ``None``."""
    ch = _char(c)
    if ch == _NUL:
        return ""
    pos = text.rfind(ch)
    return None if pos < 0 else text[pos:]


def strchr_pos(text: Optional[str], c: CharLike) -> int:
    """Return the index of the first ``c`` in ``text``, or -1.

    Searching for the NUL character gives the length of ``text``.
    """
    if text is None:
        return -1
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    return text.find(ch)


def _bounded_find(big: str, little: str, length: int) -> int:
    """Index of the first ``little`` that ends within ``length`` characters."""
    pos = big.find(little)
    if pos < 0 or pos + len(little) > length:
        return -1
    return pos


def strnstr(big: str, little: str, length: int) -> Optional[str]:
    """Find ``little`` inside the first ``length`` characters of ``big``.

    Returns the suffix of ``big`` starting at the match, ``big`` itself when
    ``little`` is empty, and ``None`` when there is no match in bounds.
    """
    if not little:
        return big
    pos = _bounded_find(big, little, length)
    return None if pos < 0 else big[pos:]


def strnstr_pos(big: str, little: str, length: int) -> int:
    """Index of ``little`` inside the first ``length`` characters of ``big``.

    Returns 0 when ``little`` is empty or not found, so callers check for
    a match first when position 0 matters.
    """
    if not little:
        return 0
    return max(_bounded_find(big, little, length), 0)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; returns -1, 0 or 1."""
    if n <= 0:
        return 0
    a, b = s1[:n], s2[:n]
    return (a > b) - (a < b)


def str_cmp(s1: str, s2: str) -> bool:
    """True when both strings are identical."""
    return s1 == s2


def rptcheck_str(items: Optional[Iterable[str]]) -> bool:
    """True when some string occurs more than once in ``items``."""
    if items is None:
        return False
    seen = set()
    for item in items:
        if item in seen:
            return True
        seen.add(item)
    return False


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text, truncated to ``size - 1`` characters, and the
    full length of ``src``.
    """
    if size <= 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` in a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have
    had, counting at most ``size`` characters of ``dest``.
    """
    dest_len = len(dest)
    total = len(src) + min(size, dest_len)
    room = max(size - 1 - dest_len, 0)
    return dest + src[:room], total


def strdup(src: str) -> str:
    """Return a copy of ``src``."""
    if src is None:
        raise TypeError("cannot duplicate None")
    return str(src)


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; ``None`` if either is missing."""
    if s1 is None or s2 is None:
        return None
    return s1 + s2


def strbuild(s1: Optional[str], s2: Optional[str]) -> str:
    """Extend ``s1`` with ``s2``, treating a missing ``s1`` as empty."""
    base = "" if s1 is None else s1
    if s2 is None:
        return base
    return base + s2


def substr(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` from ``start``.

    A start past the end or a zero length gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text) or length == 0:
        return ""
    return text[start : start + length]


def _all_strings(items: Sequence[str]) -> bool:
    return all(isinstance(item, str) for item in items)