"""Write characters, strings, lines and integers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from .strings import _cstr, itoa

CharLike = Union[int, str]


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar_fd(char: CharLike, stream: Optional[TextIO] = None) -> None:
    """Write one character; an integer is taken as a byte code."""
    if isinstance(char, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(char, int):
        char = chr(char & 0xFF)
    elif not isinstance(char, str) or len(char) != 1:
        raise ValueError("expected a single character")
    _target(stream).write(char)


def putstr_fd(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write *text* up to its first NUL; ``None`` writes nothing."""
    if text is None:
        return
    _target(stream).write(_cstr(text))


def putendl_fd(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write *text* followed by a newline; ``None`` writes nothing."""
    if text is None:
        return
    _target(stream).write(_cstr(text) + "\n")


def putnbr_fd(number: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of a 32-bit signed integer."""
    _target(stream).write(itoa(number))