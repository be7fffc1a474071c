"""String construction helpers: duplicate, slice, join, trim, split and map.

Input strings end at their first NUL character, as in C. Functions that
would return a null pointer for a missing input return ``None`` instead.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any, Callable, List, Optional, Union

from .strings import _char_code, _cstr

CharLike = Union[int, str]


def strdup(text: str) -> str:
    """Return a copy of *text* up to its first NUL."""
    return _cstr(text)


def substr(text: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most *length* characters of *text* beginning at *start*.

    A *start* at or past the end gives an empty string; a ``None`` *text*
    gives ``None``.
    """
    if text is None:
        return None
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    source = _cstr(text)
    if start >= len(source):
        return ""
    return source[start : start + length]


def strjoin(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """Return *first* followed by *second*, or ``None`` if either is missing."""
    if first is None or second is None:
        return None
    return _cstr(first) + _cstr(second)


def strtrim(text: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove every leading and trailing character found in *charset*.

    Returns ``None`` if either argument is missing.
    """
    if text is None or charset is None:
        return None
    return _cstr(text).strip(_cstr(charset))


def split(text: Optional[str], separator: CharLike) -> Optional[List[str]]:
    """Split *text* on *separator*, dropping empty pieces.

    A NUL separator never occurs inside a string, so the whole text is one
    piece. A ``None`` *text* gives ``None``.
    """
    if text is None:
        return None
    source = _cstr(text)
    code = _char_code(separator)
    if code == 0:
        return [source] if source else []
    return [word for word in source.split(chr(code)) if word]


def strmapi(text: Optional[str], func: Callable[[int, str], str]) -> Optional[str]:
    """Return a new string built from ``func(index, char)`` for each character."""
    if text is None:
        return None
    return "".join(func(index, char) for index, char in enumerate(_cstr(text)))


def _is_terminator(item: Any) -> bool:
    return item == 0 or item == "\0"


def striteri(buffer: Optional[MutableSequence], func: Callable[[int, Any], Any]) -> None:
    """Call ``func(index, item)`` on each item of *buffer* up to a NUL.

    The buffer is changed in place: when *func* returns something other
    than ``None``, that value replaces the item. A ``None`` buffer is ignored.
    """
    if buffer is None:
        return
    for index, item in enumerate(buffer):
        if _is_terminator(item):
            break
        result = func(index, item)
        if result is not None:
            buffer[index] = result