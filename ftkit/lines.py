"""Read a stream one line at a time in fixed-size chunks.

A source is either an integer file descriptor, read with ``os.read``, or an
object with a ``read(size)`` method giving ``bytes`` or ``str``. Lines keep
their trailing newline; the last line may lack one. As with C strings, any
part of a chunk after a NUL character is dropped.
"""

from __future__ import annotations

import os
from typing import Any, Iterator, Optional, Tuple, Union

BUFFER_SIZE = 100

Text = Union[bytes, bytearray, str]


def _newline_index(data: Text) -> int:
    """Return the index of the first newline in *data*, or -1."""
    if isinstance(data, str):
        return data.find("\n")
    return data.find(b"\n")


def _until_nul(data: Text) -> Text:
    nul = "\0" if isinstance(data, str) else b"\0"
    end = data.find(nul)
    return data if end < 0 else data[:end]


def _check_arguments(source: Any, buffer_size: int) -> None:
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")
    if isinstance(source, int) and source < 0:
        raise ValueError(f"file descriptor must not be negative, got {source}")


def _read_chunk(source: Any, size: int) -> Text:
    if isinstance(source, int):
        return os.read(source, size)
    data = source.read(size)
    return b"" if data is None else data


def _next_line(
    source: Any, size: int, pending: Optional[Text]
) -> Tuple[Optional[Text], Optional[Text]]:
    """Return the next line and the text left over after it."""
    while pending is None or _newline_index(pending) < 0:
        chunk = _read_chunk(source, size)
        piece = _until_nul(chunk)
        pending = piece if pending is None else pending + piece
        if not chunk:
            break
    if not pending:
        return None, None
    end = _newline_index(pending)
    if end < 0:
        return pending, None
    return pending[: end + 1], pending[end + 1 :]


class LineReader:
    """Yield the lines of one source, keeping unread text between calls."""

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        _check_arguments(stream, buffer_size)
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[Text] = None

    def read_line(self) -> Optional[Text]:
        """Return the next line, or None at the end of the stream."""
        try:
            line, self._pending = _next_line(self._stream, self._buffer_size, self._pending)
        except OSError:
            self._pending = None
            raise
        return line

    def __iter__(self) -> Iterator[Text]:
        line = self.read_line()
        while line is not None:
            yield line
            line = self.read_line()


_shared_pending: Optional[Text] = None


def get_next_line(fd: Any, buffer_size: int = BUFFER_SIZE) -> Optional[Text]:
    """Return the next line from *fd*, or None at the end.

    Unread text is kept in a single buffer shared by every call, whichever
    source it is made with.
    """
    global _shared_pending
    _check_arguments(fd, buffer_size)
    try:
        line, _shared_pending = _next_line(fd, buffer_size, _shared_pending)
    except OSError:
        _shared_pending = None
        raise
    return line