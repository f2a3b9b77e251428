# wirefdf

`wirefdf` is a small toolkit of character, byte-buffer, string, linked-list,
line-reading and formatting helpers, written for reading and handling
height-map text files. It has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## What it does not do

The package does not yet contain a viewer. It has no command to run, it does
not parse height-map files into points, and it does not project or draw a
wireframe. What it offers is the set of helpers listed below.

## Modules

### `wirefdf.chars`

ASCII character tests and case conversion. Each function takes a
one-character string or an integer code.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print` return a bool.
- `to_upper`, `to_lower` convert ASCII letters only and return a value of the
  same kind they were given (`to_upper("a") == "A"`, `to_upper(97) == 65`).

### `wirefdf.memory`

Operations on `bytearray` buffers. A count larger than the buffer, or a
negative count, raises `ValueError`.

- `memset(buffer, value, count)` fills bytes and returns the buffer.
- `bzero(buffer, count)` zeroes bytes.
- `calloc(count, size)` returns a zero-filled `bytearray`; a total of 2**64
  bytes or more raises `OverflowError`.
- `memcpy(dest, src, count)` copies into the start of `dest`.
- `memmove(buffer, dest, src, count)` copies between offsets of one buffer;
  the regions may overlap.
- `memchr(data, value, count)` returns the index of a byte, or `None`.
- `memcmp(first, second, count)` returns the difference of the first unequal
  pair of bytes, or 0.

### `wirefdf.strings`

C-style string functions. A NUL character ends a string; searches return
indices or `None`.

- `strchr`, `strrchr`, `strnstr` search.
- `strcmp`, `strncmp` compare and return the difference of the first unequal
  pair.
- `strlcpy(dest, src, size)` and `strlcat(dest, src, size)` write into a
  `bytearray` and return the length of the string they tried to create.
- `atoi(text)` parses a leading decimal integer, wrapping like a 32-bit
  signed integer.
- `atoi_base(text, base)` parses with the digits of `base`; an odd number of
  leading `-` signs makes it negative. A bad base raises `ValueError`.
- `itoa(number)` formats a 32-bit signed integer; anything outside that range
  raises `OverflowError`.

```python
from wirefdf.strings import atoi, atoi_base

atoi("  -42abc")                          # -42
atoi_base("ff0000", "0123456789abcdef")   # 16711680
```

### `wirefdf.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream,
standard output by default. `put_str(None)` writes nothing;
`put_endl(None)` writes only the newline.

### `wirefdf.linkedlist`

`LinkedList` is a singly linked list of `Node` objects, built empty or from
an iterable. It supports `append`, `appendleft`, `len()`, iteration, `head`,
`last()` (raises `IndexError` when empty), `clear(delete=None)`,
`for_each(func)` and `map(func, delete=None)`. If `func` raises during
`map`, the contents produced so far are passed to `delete` and the exception
propagates.

### `wirefdf.lines`

`LineReader(stream, buffer_size=42)` reads a text or binary stream in
fixed-size chunks and returns one line at a time, keeping the newline.
`read_line()` returns `None` at the end of the stream, `reset()` discards
text read ahead, and the reader can be iterated.

```python
import io
from wirefdf.lines import LineReader

list(LineReader(io.StringIO("0 0 0\n0 10 0\n")))
# ['0 0 0\n', '0 10 0\n']
```

### `wirefdf.printf`

`format_string(fmt, *args)` supports `%c %s %p %d %i %u %x %X %%`, with no
flags or widths. Integers are treated as 32-bit; `%s` of `None` gives
`(null)` and `%p` of a false value gives `(nil)`. An unknown conversion, a
trailing `%` or a missing argument raises `FormatError`.
`printf(fmt, *args, stream=None)` writes the result and returns its length.

```python
from wirefdf.printf import format_string

format_string("%d points, colour %X", 3, 0xFF0000)
# '3 points, colour FF0000'
```