"""Byte-buffer primitives over Python's bytes-like objects.

Destination buffers are writable bytes-like objects such as
``bytearray`` or a ``memoryview`` of one. A length that reaches past the
end of a buffer raises ``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_length(buf: Buffer, n: int) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if n > len(buf):
        raise ValueError(f"length {n} exceeds buffer size {len(buf)}")


def bzero(buf: WritableBuffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check_length(buf, n)
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(s: Buffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` in ``s[:n]``, or None."""
    _check_length(s, n)
    index = bytes(s[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1: Buffer, s2: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first mismatch.

    Bytes compare as unsigned values. Zero means the ranges are equal.
    """
    _check_length(s1, n)
    _check_length(s2, n)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dst: WritableBuffer, src: Buffer, n: int) -> WritableBuffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``; return ``dst``."""
    _check_length(src, n)
    _check_length(dst, n)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(dst: WritableBuffer, src: Buffer, n: int) -> WritableBuffer:
    """Copy ``n`` bytes from ``src`` to ``dst``, safe when the two overlap."""
    _check_length(src, n)
    _check_length(dst, n)
    chunk = bytes(src[:n])
    dst[:n] = chunk
    return dst


def memset(buf: WritableBuffer, c: int, n: int) -> WritableBuffer:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` (as a byte); return ``buf``."""
    _check_length(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf