"""Byte-buffer filling, searching, comparison and copying helpers."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError("count must not be negative")


def _check_span(data: ReadableBuffer, offset: int, count: int, name: str) -> None:
    if offset < 0:
        raise ValueError(f"{name} offset must not be negative")
    if offset + count > len(data):
        raise ValueError(
            f"{name} span of {count} bytes at offset {offset} "
            f"exceeds buffer of {len(data)} bytes"
        )


def fill(buffer: Buffer, value: int, count: int) -> Buffer:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` narrowed to a byte."""
    _check_count(count)
    _check_span(buffer, 0, count, "fill")
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def zero(buffer: Buffer, count: int) -> Buffer:
    """Set the first ``count`` bytes of ``buffer`` to zero."""
    return fill(buffer, 0, count)


def allocate_zeroed(count: int, size: int) -> bytearray:
    """A zero-filled buffer holding ``count`` elements of ``size`` bytes each.

    When either factor is zero the buffer is empty.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def find_byte(data: ReadableBuffer, value: int, count: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` within the first ``count`` bytes, or None."""
    _check_count(count)
    _check_span(data, 0, count, "search")
    index = bytes(data[:count]).find(value & 0xFF)
    return index if index >= 0 else None


def compare(first: ReadableBuffer, second: ReadableBuffer, count: int) -> int:
    """Compare the first ``count`` bytes of two buffers.

    Returns zero when they match, otherwise the difference between the first
    differing bytes.
    """
    _check_count(count)
    _check_span(first, 0, count, "first")
    _check_span(second, 0, count, "second")
    for left, right in zip(first[:count], second[:count]):
        if left != right:
            return left - right
    return 0


def copy_bytes(dest: Buffer, source: ReadableBuffer, count: int) -> Buffer:
    """Copy the first ``count`` bytes of ``source`` to the start of ``dest``."""
    _check_count(count)
    _check_span(dest, 0, count, "destination")
    _check_span(source, 0, count, "source")
    dest[:count] = bytes(source[:count])
    return dest


def move(buffer: Buffer, dest_offset: int, source_offset: int, count: int) -> Buffer:
    """Copy ``count`` bytes within ``buffer``; the two regions may overlap."""
    _check_count(count)
    _check_span(buffer, dest_offset, count, "destination")
    _check_span(buffer, source_offset, count, "source")
    chunk = bytes(buffer[source_offset : source_offset + count])
    buffer[dest_offset : dest_offset + count] = chunk
    return buffer