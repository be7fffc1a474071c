"""ASCII character classification and case conversion.

Every function accepts a character either as an integer code or as a
one-character string. The predicates return booleans. The case converters
return a value of the same kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_UPPER_TO_LOWER = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code of *c*."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def isalpha(c: CharLike) -> bool:
    """True for the ASCII letters a-z and A-Z."""
    n = _code(c)
    return ord("a") <= n <= ord("z") or ord("A") <= n <= ord("Z")


def isdigit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    n = _code(c)
    return ord("0") <= n <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def toupper(c: CharLike) -> CharLike:
    """Map an ASCII lowercase letter to uppercase; return anything else unchanged."""
    n = _code(c)
    if ord("a") <= n <= ord("z"):
        return _same_kind(c, n - _UPPER_TO_LOWER)
    return c


def tolower(c: CharLike) -> CharLike:
    """Map an ASCII uppercase letter to lowercase; return anything else unchanged."""
    n = _code(c)
    if ord("A") <= n <= ord("Z"):
        return _same_kind(c, n + _UPPER_TO_LOWER)
    return c