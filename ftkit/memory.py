"""Byte-buffer helpers operating on ``bytearray`` objects.

Buffers are mutated in place and returned where the operation yields a
buffer. Requests that reach past the end of a buffer raise ``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")


def _check_span(buf: BytesLike, start: int, n: int, name: str) -> None:
    if start < 0 or start + n > len(buf):
        raise ValueError(
            f"{name}: {n} bytes at offset {start} exceed buffer of {len(buf)} bytes"
        )


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    _check_count(count)
    _check_count(size)
    if size != 0 and count > SIZE_MAX // size:
        raise OverflowError(f"{count} elements of {size} bytes overflow the size limit")
    return bytearray(count * size)


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` within ``n`` bytes, or None."""
    _check_count(n)
    _check_span(data, 0, n, "memchr")
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1: BytesLike, s2: BytesLike, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, or 0."""
    _check_count(n)
    _check_span(s1, 0, n, "memcmp")
    _check_span(s2, 0, n, "memcmp")
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``."""
    _check_count(n)
    if n == 0 or dest is src:
        return dest
    _check_span(dest, 0, n, "memcpy")
    _check_span(src, 0, n, "memcpy")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf`` from offset ``src`` to ``dest``; overlap is safe."""
    _check_count(n)
    _check_span(buf, dest, n, "memmove")
    _check_span(buf, src, n, "memmove")
    if dest != src and n:
        buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` (taken modulo 256)."""
    _check_count(n)
    _check_span(buf, 0, n, "memset")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf