"""Byte-buffer helpers: filling, zeroing, searching, comparing and copying."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_length(name: str, data, n: int) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if len(data) < n:
        raise ValueError(f"{name} holds {len(data)} bytes, fewer than {n}")


def memset(buffer: Buffer, c: int, n: int) -> Buffer:
    """Set the first ``n`` bytes of ``buffer`` to ``c`` taken as an unsigned byte."""
    _check_length("buffer", buffer, n)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer


def bzero(buffer: Buffer, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)


def memchr(data: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` within ``n`` bytes, or None."""
    _check_length("data", data, n)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(first: ReadableBuffer, second: ReadableBuffer, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, or 0."""
    _check_length("first", first, n)
    _check_length("second", second, n)
    for left, right in zip(bytes(first[:n]), bytes(second[:n])):
        if left != right:
            return left - right
    return 0


def memcpy(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _check_length("dest", dest, n)
    _check_length("src", src, n)
    if n:
        dest[:n] = src[:n]
    return dest


def memmove(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to ``dest``; the regions may overlap."""
    _check_length("dest", dest, n)
    _check_length("src", src, n)
    if n:
        dest[:n] = bytes(src[:n])
    return dest