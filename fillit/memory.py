"""Byte-buffer operations on bytearrays and bytes-like objects."""

from __future__ import annotations

from typing import Optional


def _check_length(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of size {len(buf)}")


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes with ``value`` (taken modulo 256)."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> None:
    """Set the first ``length`` bytes to zero."""
    memset(buffer, 0, length)


def memcpy(dst: bytearray, src: bytes, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``."""
    if dst is src:
        return dst
    _check_length(n, dst, src)
    dst[:n] = src[:n]
    return dst


def memccpy(dst: bytearray, src: bytes, stop: int, n: int) -> Optional[int]:
    """Copy bytes until ``stop`` has been copied or ``n`` bytes are done.

    Returns the offset in ``dst`` just past the copied stop byte, or None if
    it was not found in the first ``n`` bytes. Copying a buffer onto itself
    copies nothing and returns 0.
    """
    if dst is src:
        return 0
    _check_length(n, dst, src)
    stop &= 0xFF
    for index, byte in enumerate(src[:n]):
        dst[index] = byte
        if byte == stop:
            return index + 1
    return None


def memmove(buffer: bytearray, dst_offset: int, src_offset: int, n: int) -> Optional[bytearray]:
    """Copy ``n`` bytes within ``buffer``; the regions may overlap.

    Returns the buffer, or None when the two offsets are the same and
    nothing needs to move.
    """
    if dst_offset == src_offset:
        return None
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_length(n)
    if max(dst_offset, src_offset) + n > len(buffer):
        raise ValueError("region extends past the end of the buffer")
    buffer[dst_offset:dst_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``value`` in the first ``n``, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair, or 0."""
    _check_length(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memalloc(size: int) -> bytearray:
    """Return a zero-filled buffer of ``size`` bytes."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return bytearray(size)