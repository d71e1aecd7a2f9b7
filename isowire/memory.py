"""Byte-buffer helpers: fill, search, compare and copy."""

from __future__ import annotations


def _check_span(buf, start: int, n: int) -> None:
    if n < 0 or start < 0:
        raise ValueError("offsets and lengths must not be negative")
    if start + n > len(buf):
        raise ValueError(
            f"span of {n} bytes at {start} exceeds buffer of {len(buf)} bytes"
        )


def mem_set(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of value."""
    _check_span(buf, 0, n)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def zero(buf: bytearray, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    mem_set(buf, 0, n)


def alloc_zeroed(count: int, size: int) -> bytearray:
    """Return a new zero-filled buffer of count elements of size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def mem_find(buf: bytes | bytearray, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to value among the first n, or None."""
    _check_span(buf, 0, n)
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def mem_compare(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first n bytes: -1, 0 or 1 by the first differing byte."""
    _check_span(a, 0, n)
    _check_span(b, 0, n)
    left, right = bytes(a[:n]), bytes(b[:n])
    return (left > right) - (left < right)


def mem_copy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first n bytes of src into the start of dest."""
    _check_span(dest, 0, n)
    _check_span(src, 0, n)
    dest[:n] = bytes(src[:n])
    return dest


def mem_move(buf: bytearray, dest_start: int, src_start: int, n: int) -> bytearray:
    """Copy n bytes within buf from src_start to dest_start; the spans may overlap."""
    _check_span(buf, src_start, n)
    _check_span(buf, dest_start, n)
    buf[dest_start:dest_start + n] = bytes(buf[src_start:src_start + n])
    return buf