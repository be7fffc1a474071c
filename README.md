# ftkit

A small library of C-style byte and string helpers, a minimal
printf-style formatter and a line reader that pulls a stream in through
a fixed-size buffer.

Strings are treated the C way: each one ends at its first NUL character.
Where a C function would hand back a pointer into a string, these
functions return an index, or `None` when nothing was found.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `ftkit.chars`: ASCII classification and case mapping: `isalpha`,
  `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper` and `tolower`.
  Each accepts an integer code or a one-character string. The predicates
  return booleans. The case functions return the same kind of value they
  were given.
- `ftkit.memory`: operations on byte buffers such as `bytearray`:
  `memset`, `bzero`, `memcpy`, `memmove` (with optional `dest_offset` and
  `src_offset` for overlapping moves within one buffer), `memchr` (returns
  an index or `None`), `memcmp` and `calloc` (returns a zero-filled
  `bytearray`). A span that runs past the end of a buffer raises
  `ValueError`.
- `ftkit.strings`: `strlen`, `strlcpy` and `strlcat` (each returns a
  `(text, length)` pair), `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `atoi` (wraps to 32-bit signed) and `itoa` (accepts only 32-bit signed
  integers and raises `OverflowError` otherwise).
- `ftkit.transform`: building new strings: `strdup`, `substr`,
  `strjoin`, `strtrim`, `split` (drops empty pieces), `strmapi`, and
  `striteri`, which updates a mutable sequence in place.
- `ftkit.output`: `putchar_fd`, `putstr_fd`, `putendl_fd` and
  `putnbr_fd` write to a text stream, or to standard output when no
  stream is given.
- `ftkit.printf`: `sprintf` returns the formatted text. `printf` writes
  it to a stream, or to standard output by default, and returns its
  length. They understand `%c %s %p %d %i %u %x %X %%`. `%d`, `%i`, `%u`,
  `%x` and `%X` work on 32 bits and `%p` on 64 bits. A null string prints
  as `(null)` and a null pointer as `(nil)`. A `%` followed by an unknown
  character writes nothing. The single conversions are also available as
  `format_hex`, `format_pointer`, `format_unsigned`, `format_signed` and
  `format_string`.
- `ftkit.lines`: `LineReader` reads lines from a file descriptor or from
  any object with a `read(size)` method, one chunk of `buffer_size` at a
  time (100 by default). Lines keep their trailing newline and come back
  as `bytes` or `str`, matching what the source gives. `get_next_line`
  does the same through one pending buffer that every call shares.

## Examples

```python
from ftkit.printf import sprintf
from ftkit.strings import atoi, itoa, strchr
from ftkit.transform import split, strtrim

sprintf("%s has %d items (0x%x)", "cart", 42, 255)
# 'cart has 42 items (0xff)'
sprintf("%p %s", 0, None)      # '(nil) (null)'

atoi("   -123abc")             # -123
itoa(-2147483648)              # '-2147483648'
strchr("Veritasium", "a")      # 5
split("Hello World 42", " ")   # ['Hello', 'World', '42']
strtrim("!!!!hello!!!", "!")   # 'hello'
```

Reading lines:

```python
import io
from ftkit.lines import LineReader

reader = LineReader(io.BytesIO(b"first\nsecond\nlast"), buffer_size=4)
list(reader)
# [b'first\n', b'second\n', b'last']
```

`read_line()` returns one line at a time and returns `None` once the
stream is exhausted.

## What it does not do

This is a library only. It installs no command-line program. The
formatter has no field widths, precision or flags.