"""Byte-buffer helpers: filling, copying, moving, searching and comparing."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_length(length: int, *buffers: BytesLike) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if length > len(buf):
            raise ValueError(
                f"length {length} exceeds buffer of size {len(buf)}"
            )


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``value``."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Zero the first ``length`` bytes of ``buffer``."""
    return memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst: bytearray, src: BytesLike, length: int) -> bytearray:
    """Copy ``length`` bytes from ``src`` to the start of ``dst``."""
    _check_length(length, dst, src)
    dst[:length] = bytes(src[:length])
    return dst


def memmove(
    buffer: bytearray, dst_offset: int, src_offset: int, length: int
) -> bytearray:
    """Move ``length`` bytes inside ``buffer``; overlapping ranges are safe."""
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if max(dst_offset, src_offset) + length > len(buffer):
        raise ValueError("range exceeds buffer")
    buffer[dst_offset:dst_offset + length] = bytes(
        buffer[src_offset:src_offset + length]
    )
    return buffer


def memchr(data: BytesLike, value: int, length: int) -> Optional[int]:
    """Index of the first ``value`` byte in the first ``length`` bytes, or None."""
    _check_length(length, data)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, length: int) -> int:
    """Difference of the first differing bytes within ``length``, else 0."""
    _check_length(length, a, b)
    for x, y in zip(bytes(a[:length]), bytes(b[:length])):
        if x != y:
            return x - y
    return 0