"""Trimming, replacing, splitting and mapping over strings and string lists."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Sequence


def _single(c: str, name: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{name} must be a single character, got {c!r}")
    return c


def strtrim(text: str, charset: str) -> str:
    """Remove every character of ``charset`` from both ends of ``text``.

    An empty ``charset`` leaves the text unchanged.
    """
    if text is None or charset is None:
        raise TypeError("text and charset are required")
    if not charset:
        return text
    return text.strip(charset)


def str_repl_chr(
    text: Optional[str], old: str, new: str, times: int
) -> Optional[str]:
    """Replace the first ``times`` occurrences of ``old`` with ``new``.

    A ``times`` of zero returns the text unchanged; ``None`` gives ``None``.
    """
    if text is None:
        return None
    _single(old, "old")
    _single(new, "new")
    if times < 0:
        raise ValueError("times must not be negative")
    if times == 0:
        return text
    return text.replace(old, new, times)


def str_repl_seg(
    text: Optional[str], old: Optional[str], new: str
) -> Optional[str]:
    """Replace the first occurrence of ``old`` in ``text`` with ``new``.

    Returns ``None`` when ``text`` or ``old`` is missing, when ``old`` is
    longer than ``text`` or when it does not occur. An empty ``old``
    inserts ``new`` at the start.
    """
    if text is None or old is None:
        return None
    if new is None:
        raise TypeError("new is required")
    if len(old) > len(text) or old not in text:
        return None
    return text.replace(old, new, 1)


def matrix_dup(lines: Sequence[str]) -> List[str]:
    """Return a new list holding the same lines."""
    if lines is None:
        raise TypeError("lines are required")
    return list(lines)


def matrix_add_line(lines: Optional[Sequence[str]], newline: str) -> List[str]:
    """Return a new list of ``lines`` with ``newline`` appended.

    A missing ``lines`` is treated as empty.
    """
    if newline is None:
        raise TypeError("newline is required")
    return [*(lines or ()), newline]


def striteri(
    buffer: Optional[MutableSequence[str]],
    f: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Call ``f(index, char)`` for each character of ``buffer`` in order.

    Whatever ``f`` returns other than ``None`` replaces the character in
    place. Iteration stops at a NUL character.
    """
    if buffer is None or f is None:
        return
    for index, ch in enumerate(list(buffer)):
        if ch == "\0":
            break
        replacement = f(index, ch)
        if replacement is not None:
            buffer[index] = replacement


def strmapi(
    text: Optional[str], f: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """Build a string from ``f(index, char)`` over each character of ``text``."""
    if text is None or f is None:
        return None
    return "".join(f(index, ch) for index, ch in enumerate(text))


def split(text: Optional[str], delim: str) -> Optional[List[str]]:
    """Split ``text`` on ``delim``, dropping empty words."""
    if text is None:
        return None
    _single(delim, "delim")
    return [word for word in text.split(delim) if word]