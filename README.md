# ftlib

A small collection of everyday helpers, with no dependencies beyond the
standard library. It is a library only: it installs no command.

## Modules

- `ftlib.chars`: ASCII character checks that take a one-character string
  or an integer code point: `isalnum`, `isalpha`, `isdigit`, `isprint`,
  `isascii`, `isdelim` (space, tab, newline, vertical tab, form feed,
  carriage return) and `isemptystr`. `tolower` and `toupper` change only
  ASCII letters and return the same kind of value they were given.
  `smaller_int` returns the smaller of two integers.
- `ftlib.convert`: `atoi` and `atol` parse a leading decimal integer
  after optional whitespace and one sign, stop at the first non-digit,
  give 0 when there are no digits, and wrap to 32-bit and 64-bit signed
  values respectively. `itoa` formats a 32-bit signed integer.
- `ftlib.strings`: `strlen`, `strchr`, `strrchr` and `strnstr` (which
  return the matching suffix or `None`), `strchr_pos` and `strnstr_pos`
  (which return an index), `strncmp` (-1, 0 or 1), `str_cmp` (equality),
  `rptcheck_str` (any repeated string), `strlcpy` and `strlcat` (which
  return the resulting text and the length the full result would have
  had), `strdup`, `strjoin`, `strbuild` and `substr`.
- `ftlib.textops`: `strtrim`, `split` (drops empty words),
  `str_repl_chr` (first *n* occurrences of a character), `str_repl_seg`
  (first occurrence of a substring, or `None` when it is absent),
  `strmapi`, `striteri` (calls a function on each character of a mutable
  sequence and stores any non-`None` result back in place),
  `matrix_dup` and `matrix_add_line`.
- `ftlib.memory`: helpers for `bytearray` and `memoryview` buffers:
  `memset`, `bzero`, `calloc`, `memcpy`, `memmove`, `memchr` (returns an
  index or `None`) and `memcmp` (-1, 0 or 1). A byte count larger than a
  buffer raises `ValueError`.
- `ftlib.output`: writers to a numeric file descriptor: `putchar_fd`,
  `putstr_fd` (writes `(null)` for `None`), `putendl_fd`, `putnbr_fd`,
  `putnbr_ubase_fd` and `putnbr_lbase_fd` (32-bit and 64-bit unsigned
  values in any base of two or more distinct visible characters without
  signs; an invalid base writes nothing and returns 0). `printf` writes to
  standard output and supports `%c %s %p %d %i %u %x %X %%`; an unknown
  conversion writes its letter alone. `error_msg` prints a highlighted
  `Error:` line and returns 1; `error_exit` does the same and exits with
  status 1.
- `ftlib.lines`: `LineReader(fd, buffer_size=40, encoding="utf-8",
  errors="strict")` reads a file descriptor line by line, keeping each
  trailing newline; `read_line()` returns `None` at end of input and the
  reader is iterable. `get_next_line(fd)` keeps one reader per descriptor
  below 2000 and returns `None` at end of input or on a read error.
- `ftlib.linkedlist`: `Node` and a doubly linked `LinkedList` with
  `add_front`, `add_back`, `last`, `len()`, iteration over contents,
  `clear(delete)`, `iterate(f)` and `map(f, delete)`, plus
  `delete_node(node, delete)`.
- `ftlib.flood`: `flood_fill(grid, size, begin)` turns the region of
  matching characters around `begin` into `'F'` in place and returns the
  number of cells changed. Positions and sizes are `Point(x, y)`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ftlib.convert import atoi, itoa
from ftlib.textops import split, strtrim
from ftlib.flood import Point, flood_fill

atoi("   -42abc")               # -42
itoa(-2147483648)               # "-2147483648"
split("  hello  world ", " ")   # ["hello", "world"]
strtrim("xxhixx", "x")          # "hi"

grid = [list("1100"), list("1001"), list("1111")]
flood_fill(grid, Point(4, 3), Point(0, 0))
# every '1' connected to (0, 0) is now 'F'
```

```python
import os
from ftlib.lines import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd):
    print(line, end="")
os.close(fd)
```

```python
from ftlib.output import printf

count = printf("%s has %d items (%x)\n", "box", 42, 255)
```