"""A small printf: the conversions %c %s %p %d %i %u %x %X and %%.

Integers are reduced to the C width of their conversion: 32 bits for
%d, %i, %u, %x and %X, 64 bits for %p. A ``%`` at the very end of the
format is written as is, and a ``%`` followed by an unknown character
writes nothing and uses no argument.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO, Union

from .strings import _cstr, _wrap_int32, itoa

UINT_MASK = 2**32 - 1
POINTER_MASK = 2**64 - 1

_HEX_DIGITS = {"x": "0123456789abcdef", "X": "0123456789ABCDEF"}
_MISSING = object()


def _require_int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} expects an int, got {type(value).__name__}")
    return value


def _base16(value: int, digits: str) -> str:
    if value == 0:
        return digits[0]
    out = []
    while value:
        value, remainder = divmod(value, 16)
        out.append(digits[remainder])
    return "".join(reversed(out))


def format_hex(number: int, spec: str = "x") -> str:
    """Return *number* as a 32-bit unsigned hexadecimal; *spec* is 'x' or 'X'."""
    if spec not in _HEX_DIGITS:
        raise ValueError(f"hex spec must be 'x' or 'X', got {spec!r}")
    value = _require_int(number, "%" + spec) & UINT_MASK
    return _base16(value, _HEX_DIGITS[spec])


def format_pointer(address: Optional[int]) -> str:
    """Return an address as ``0x`` plus lowercase hex, or ``(nil)`` for null."""
    if address is None:
        return "(nil)"
    value = _require_int(address, "%p") & POINTER_MASK
    if value == 0:
        return "(nil)"
    return "0x" + _base16(value, _HEX_DIGITS["x"])


def format_unsigned(number: int) -> str:
    """Return *number* as a 32-bit unsigned decimal."""
    return str(_require_int(number, "%u") & UINT_MASK)


def format_signed(number: int) -> str:
    """Return *number* as a 32-bit signed decimal."""
    return itoa(_wrap_int32(_require_int(number, "%d")))


def format_string(text: Optional[str]) -> str:
    """Return *text* up to its first NUL, or ``(null)`` for ``None``."""
    if text is None:
        return "(null)"
    return _cstr(text)


def _format_char(value: Union[int, str]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(_require_int(value, "%c") & 0xFF)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    value = next(args, _MISSING)
    if value is _MISSING:
        raise TypeError("not enough arguments for format string")
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return format_string(value)
    if spec == "p":
        return format_pointer(value)
    if spec in "di":
        return format_signed(value)
    if spec == "u":
        return format_unsigned(value)
    return format_hex(value, spec)


def sprintf(fmt: Optional[str], *args: Any) -> str:
    """Return the text that :func:`printf` would write."""
    if fmt is None:
        raise TypeError("format must be a string, not None")
    remaining = iter(args)
    chars = iter(_cstr(fmt))
    out = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        out.append("%" if spec is None else _convert(spec, remaining))
    return "".join(out)


def printf(fmt: Optional[str], *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to *stream* (stdout by default); return its length."""
    text = sprintf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)