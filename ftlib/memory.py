"""Operations on byte buffers: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _require(buf: ReadableBuffer, n: int, name: str) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if n > len(buf):
        raise ValueError(f"{name} holds {len(buf)} bytes, fewer than {n}")


def bzero(buf: Buffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memset(buf: Buffer, c: int, n: int) -> Buffer:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``."""
    _require(buf, n, "buffer")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("nmemb and size must not be negative")
    return bytearray(nmemb * size)


def memcpy(
    dest: Optional[Buffer], src: Optional[ReadableBuffer], n: int
) -> Optional[Buffer]:
    """Copy ``n`` bytes of ``src`` to the start of ``dest``.

    The regions should not overlap; use :func:`memmove` when they might.
    Returns ``dest``, or ``None`` when both buffers are missing.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("both dest and src are required")
    _require(dest, n, "dest")
    _require(src, n, "src")
    if n:
        dest[:n] = src[:n]
    return dest


def memmove(
    dest: Optional[Buffer], src: Optional[ReadableBuffer], n: int
) -> Optional[Buffer]:
    """Copy ``n`` bytes of ``src`` to ``dest``, safe for overlapping regions."""
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("both dest and src are required")
    _require(dest, n, "dest")
    _require(src, n, "src")
    if n:
        dest[:n] = bytes(src[:n])
    return dest


def memchr(buf: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of ``c`` within ``n`` bytes."""
    _require(buf, n, "buffer")
    pos = bytes(buf[:n]).find(c & 0xFF)
    return None if pos < 0 else pos


def memcmp(s1: ReadableBuffer, s2: ReadableBuffer, n: int) -> int:
    """Compare the first ``n`` bytes as unsigned values; returns -1, 0 or 1."""
    _require(s1, n, "s1")
    _require(s2, n, "s2")
    a, b = bytes(s1[:n]), bytes(s2[:n])
    return (a > b) - (a < b)