"""Searching, comparing, filling and copying byte buffers."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_count(n: int, *lengths: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer count, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for length in lengths:
        if n > length:
            raise ValueError(f"count {n} exceeds a buffer of {length} bytes")


def _byte(c: int) -> int:
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an integer byte value, got {type(c).__name__}")
    return c & 0xFF


def memchr(buf: Buffer, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` within the first ``n`` bytes, or None."""
    _check_count(n, len(buf))
    index = bytes(buf[:n]).find(_byte(c))
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns 0 when they are equal, otherwise the difference of the first
    differing bytes taken as unsigned values.
    """
    _check_count(n, len(a), len(b))
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memset(buf: WritableBuffer, c: int, n: int) -> WritableBuffer:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` and return ``buf``."""
    _check_count(n, len(buf))
    buf[:n] = bytes([_byte(c)]) * n
    return buf


def bzero(buf: WritableBuffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(dest: WritableBuffer, src: Buffer, n: int) -> WritableBuffer:
    """Copy the first ``n`` bytes of ``src`` into ``dest`` and return ``dest``."""
    _check_count(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: WritableBuffer, dest: int, src: int, n: int) -> WritableBuffer:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source bytes were first
    copied aside. Returns ``buf``.
    """
    for name, offset in (("dest", dest), ("src", src)):
        if isinstance(offset, bool) or not isinstance(offset, int):
            raise TypeError(f"{name} must be an integer offset")
        if offset < 0:
            raise ValueError(f"{name} must not be negative, got {offset}")
    _check_count(n, len(buf) - dest, len(buf) - src)
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def calloc(nmemb: int, size: int) -> bytearray:
    """A zero-filled buffer of ``nmemb`` elements of ``size`` bytes each."""
    for name, value in (("nmemb", nmemb), ("size", size)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an integer")
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")
    return bytearray(nmemb * size)