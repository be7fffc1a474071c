"""C-style string queries and conversions on Python ``str`` values.

Strings end at their first NUL character, as in C. Functions that would
return a pointer into a string return an index instead, or ``None`` when
nothing was found. Functions that would write into a caller's buffer return
the new text together with the length the C function reports.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

from .chars import isdigit

CharLike = Union[int, str]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _cstr(text: str) -> str:
    """Return *text* cut at its first NUL character."""
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    end = text.find("\0")
    return text if end < 0 else text[:end]


def _char_code(char: CharLike) -> int:
    """Return the code of *char*; integers are reduced to an unsigned byte."""
    if isinstance(char, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(char, int):
        return char & 0xFF
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {len(char)} characters")
        return ord(char)
    raise TypeError(f"expected an int or a one-character str, got {type(char).__name__}")


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def strlen(text: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_cstr(text))


def strlcpy(src: str, size: int) -> Tuple[Optional[str], int]:
    """Copy at most ``size - 1`` characters of *src*.

    Returns the copied text and the full length of *src*. When *size* is 0
    nothing is written and the copied text is ``None``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    source = _cstr(src)
    if size == 0:
        return None, len(source)
    return source[: size - 1], len(source)


def strlcat(dest: Optional[str], src: Optional[str], size: int) -> Tuple[Optional[str], int]:
    """Append *src* to *dest* within a buffer of *size* characters.

    Returns the resulting text and the length the append tried to create:
    the length of *dest* (capped at *size*) plus the length of *src*. When
    either string is ``None`` and *size* is 0, *dest* is returned with 0.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if (src is None or dest is None) and size == 0:
        return dest, 0
    if src is None or dest is None:
        raise TypeError("strlcat needs both a destination and a source string")
    head = _cstr(dest)
    source = _cstr(src)
    used = min(len(head), size)
    if used >= size:
        return dest, used + len(source)
    room = size - used - 1
    return head + source[:room], used + len(source)


def strchr(text: str, char: CharLike) -> Optional[int]:
    """Return the index of the first *char* in *text*, or None.

    Searching for NUL finds the terminator at ``strlen(text)``.
    """
    source = _cstr(text)
    code = _char_code(char)
    if code == 0:
        return len(source)
    index = source.find(chr(code))
    return index if index >= 0 else None


def strrchr(text: str, char: CharLike) -> Optional[int]:
    """Return the index of the last *char* in *text*, or None.

    Searching for NUL finds the terminator at ``strlen(text)``.
    """
    source = _cstr(text)
    code = _char_code(char)
    if code == 0:
        return len(source)
    index = source.rfind(chr(code))
    return index if index >= 0 else None


def strncmp(first: str, second: str, length: int) -> int:
    """Compare at most *length* characters.

    Returns the difference of the first unequal character codes, with the
    end of a string counting as code 0, or 0 when they match.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    a = _cstr(first)[:length]
    b = _cstr(second)[:length]
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    if len(a) != len(b) and min(len(a), len(b)) < length:
        longer = a if len(a) > len(b) else b
        code = ord(longer[min(len(a), len(b))])
        return code if longer is a else -code
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return where *needle* first occurs wholly within ``haystack[:length]``.

    An empty *needle* is found at index 0; None means no match.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    source = _cstr(haystack)
    target = _cstr(needle)
    if not target:
        return 0
    index = source.find(target, 0, length)
    return index if index >= 0 else None


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and sign.

    Parsing stops at the first non-digit; text without digits gives 0. The
    result wraps to a 32-bit signed integer.
    """
    source = _cstr(text)
    pos = 0
    while pos < len(source) and source[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(source) and source[pos] in "+-":
        if source[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    for ch in source[pos:]:
        if not isdigit(ch):
            break
        result = _wrap_int32(result * 10 + (ord(ch) - ord("0")))
    return _wrap_int32(result * sign)


def itoa(number: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected int, got {type(number).__name__}")
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit signed integer")
    return str(number)