"""Writing characters, strings and numbers to file descriptors.

Every writer takes a numeric file descriptor and returns the number of
characters it wrote, except :func:`putendl_fd`, which returns nothing.
"""

from __future__ import annotations

import os
import sys
from typing import Iterator, NoReturn, Optional, Union

STDOUT = 1

CONVERSION = "cspdiuxX%"
DECIMAL = "0123456789"
HEXA_LOW = "0123456789abcdef"
HEXA_UPP = "0123456789ABCDEF"

_ERROR_PREFIX = "\033[1m\033[31mError: \033[0m"

CharLike = Union[str, int]


def _write(fd: int, text: str) -> int:
    """Write all of ``text`` to ``fd`` and return its length in characters."""
    view = memoryview(text.encode("utf-8", "surrogateescape"))
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(text)


def _unsigned(value: int, bits: int) -> int:
    return int(value) & ((1 << bits) - 1)


def _signed(value: int, bits: int) -> int:
    value = _unsigned(value, bits)
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _valid_base(base: str) -> bool:
    """A base needs two or more distinct visible characters, none a sign."""
    if len(base) <= 1 or len(set(base)) != len(base):
        return False
    return all(33 <= ord(ch) <= 126 and ch not in "+-" for ch in base)


def _to_base(nbr: int, base: str) -> str:
    radix = len(base)
    digits = []
    while True:
        nbr, rest = divmod(nbr, radix)
        digits.append(base[rest])
        if not nbr:
            break
    return "".join(reversed(digits))


def putchar_fd(c: CharLike, fd: int) -> int:
    """Write one character to ``fd``; returns 1."""
    _write(fd, _char(c))
    return 1


def putstr_fd(text: Optional[str], fd: int) -> int:
    """Write ``text`` to ``fd``, or ``(null)`` when it is ``None``."""
    return _write(fd, "(null)" if text is None else text)


def putendl_fd(text: str, fd: int) -> None:
    """Write ``text`` followed by a newline to ``fd``."""
    if text is None:
        raise TypeError("text is required")
    _write(fd, text + "\n")


def putnbr_fd(n: int, fd: int) -> int:
    """Write ``n`` in decimal to ``fd``."""
    return _write(fd, str(int(n)))


def putnbr_ubase_fd(nbr: int, base: str, fd: int) -> int:
    """Write ``nbr`` as a 32-bit unsigned value using the digits of ``base``.

    An invalid base writes nothing and returns 0.
    """
    if not _valid_base(base):
        return 0
    return _write(fd, _to_base(_unsigned(nbr, 32), base))


def putnbr_lbase_fd(nbr: int, base: str, fd: int) -> int:
    """Write ``nbr`` as a 64-bit unsigned value using the digits of ``base``.

    An invalid base writes nothing and returns 0.
    """
    if not _valid_base(base):
        return 0
    return _write(fd, _to_base(_unsigned(nbr, 64), base))


def _pointer(value: Optional[int]) -> str:
    if not value:
        return "(nil)"
    return "0x" + _to_base(_unsigned(value, 64), HEXA_LOW)


def _convert(spec: str, args: Iterator[object]) -> str:
    if spec == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec in "di":
        return str(_signed(value, 32))
    if spec == "u":
        return _to_base(_unsigned(value, 32), DECIMAL)
    if spec == "x":
        return _to_base(_unsigned(value, 32), HEXA_LOW)
    if spec == "X":
        return _to_base(_unsigned(value, 32), HEXA_UPP)
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    return _pointer(value)


def _render(fmt: str, args: tuple) -> str:
    pieces = []
    arguments = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        if spec in CONVERSION:
            pieces.append(_convert(spec, arguments))
        else:
            pieces.append(spec)
    return "".join(pieces)


def printf(fmt: str, *args: object) -> int:
    """Format ``args`` into ``fmt`` and write the result to standard output.

    Supports ``%c %s %p %d %i %u %x %X %%``; an unknown conversion writes
    its letter alone. Returns the number of characters written.
    """
    text = _render(fmt, args)
    sys.stdout.flush()
    return _write(STDOUT, text)


def error_msg(message: str) -> int:
    """Print a highlighted ``Error:`` line with ``message``; returns 1."""
    printf(_ERROR_PREFIX + "%s\n", message)
    return 1


def error_exit(message: str) -> NoReturn:
    """Print a highlighted ``Error:`` line and exit with status 1."""
    error_msg(message)
    sys.exit(1)