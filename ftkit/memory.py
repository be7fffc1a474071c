"""Byte-buffer operations: fill, copy, move, search, compare and allocate.

Buffers are mutable byte sequences such as ``bytearray`` or writable
``memoryview`` objects. Lengths and offsets are checked against the buffers
and a ``ValueError`` is raised when a span would run past the end.
"""

from __future__ import annotations

from typing import Optional, Union

ReadableBuffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_span(name: str, buffer: ReadableBuffer, offset: int, length: int) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if offset < 0:
        raise ValueError(f"{name} offset must not be negative, got {offset}")
    if offset + length > len(buffer):
        raise ValueError(
            f"{name} span [{offset}, {offset + length}) exceeds buffer of size {len(buffer)}"
        )


def memset(buffer: WritableBuffer, value: int, length: int) -> WritableBuffer:
    """Fill the first *length* bytes of *buffer* with ``value & 0xFF``."""
    _check_span("buffer", buffer, 0, length)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: WritableBuffer, length: int) -> WritableBuffer:
    """Set the first *length* bytes of *buffer* to zero."""
    return memset(buffer, 0, length)


def memcpy(
    dest: Optional[WritableBuffer], src: Optional[ReadableBuffer], length: int
) -> Optional[WritableBuffer]:
    """Copy *length* bytes from *src* to the start of *dest*.

    When both buffers are ``None`` nothing happens and ``None`` is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memcpy needs both a destination and a source buffer")
    _check_span("src", src, 0, length)
    _check_span("dest", dest, 0, length)
    dest[:length] = bytes(src[:length])
    return dest


def memmove(
    dest: Optional[WritableBuffer],
    src: Optional[ReadableBuffer],
    length: int,
    dest_offset: int = 0,
    src_offset: int = 0,
) -> Optional[WritableBuffer]:
    """Copy *length* bytes between possibly overlapping regions.

    Bytes are read from ``src[src_offset:]`` and written to
    ``dest[dest_offset:]``; *dest* and *src* may be the same buffer. When both
    buffers are ``None`` nothing happens and ``None`` is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memmove needs both a destination and a source buffer")
    _check_span("src", src, src_offset, length)
    _check_span("dest", dest, dest_offset, length)
    chunk = bytes(src[src_offset : src_offset + length])
    dest[dest_offset : dest_offset + length] = chunk
    return dest


def memchr(data: ReadableBuffer, value: int, length: int) -> Optional[int]:
    """Return the index of the first ``value & 0xFF`` in the first *length* bytes, or None."""
    _check_span("data", data, 0, length)
    target = value & 0xFF
    return next(
        (index for index, byte in enumerate(bytes(data[:length])) if byte == target),
        None,
    )


def memcmp(first: ReadableBuffer, second: ReadableBuffer, length: int) -> int:
    """Compare *length* bytes; return the difference of the first unequal pair, else 0."""
    _check_span("first", first, 0, length)
    _check_span("second", second, 0, length)
    for a, b in zip(bytes(first[:length]), bytes(second[:length])):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > SIZE_MAX:
        raise OverflowError(f"allocation of {count} x {size} bytes overflows size_t")
    return bytearray(total)