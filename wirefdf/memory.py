"""Byte-buffer operations on bytearray and other byte sequences."""

from __future__ import annotations

from typing import Optional

_SIZE_LIMIT = 2**64


def _check_count(count: int, available: int, what: str) -> None:
    if count < 0:
        raise ValueError(f"{what}: count must not be negative")
    if count > available:
        raise ValueError(f"{what}: count {count} exceeds buffer length {available}")


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Fill the first count bytes of buffer with value (taken modulo 256)."""
    _check_count(count, len(buffer), "memset")
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> None:
    """Set the first count bytes of buffer to zero."""
    memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count elements of size bytes each."""
    if count < 0 or size < 0:
        raise ValueError("calloc: count and size must not be negative")
    total = count * size
    if total >= _SIZE_LIMIT:
        raise OverflowError("calloc: requested size overflows")
    return bytearray(total)


def memcpy(dest: bytearray, src: bytes, count: int) -> bytearray:
    """Copy the first count bytes of src into the start of dest."""
    _check_count(count, min(len(dest), len(src)), "memcpy")
    dest[:count] = src[:count]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, count: int) -> bytearray:
    """Copy count bytes inside buffer from offset src to offset dest.

    The regions may overlap; the result is as if the source bytes were
    first copied aside.
    """
    if dest < 0 or src < 0:
        raise ValueError("memmove: offsets must not be negative")
    _check_count(count, len(buffer) - max(dest, src), "memmove")
    buffer[dest:dest + count] = buffer[src:src + count]
    return buffer


def memchr(data: bytes, value: int, count: int) -> Optional[int]:
    """Return the index of the first byte equal to value within count bytes, or None."""
    _check_count(count, len(data), "memchr")
    target = value & 0xFF
    return next((i for i, byte in enumerate(data[:count]) if byte == target), None)


def memcmp(first: bytes, second: bytes, count: int) -> int:
    """Compare the first count bytes; return the difference of the first unequal pair, else 0."""
    if count < 1:
        return 0
    _check_count(count, min(len(first), len(second)), "memcmp")
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0