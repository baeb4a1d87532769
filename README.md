# ftkit

A small toolkit of everyday helpers, with no dependencies beyond the
standard library.

- `ftkit.chars`: ASCII character classification and case conversion
  (`is_alnum`, `is_alpha`, `is_ascii`, `is_digit`, `is_print`, `to_lower`,
  `to_upper`). Each takes a one-character string or an integer code. The
  case converters give back the same kind of value they were given.
- `ftkit.memory`: byte-buffer operations on `bytearray` objects
  (`bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove`, `memset`).
  `memchr` returns an index or `None`. `memmove` copies between two offsets
  within one buffer. A request that reaches past the end of a buffer raises
  `ValueError`. `calloc` raises `OverflowError` when the total size would be
  larger than 2**64 - 1.
- `ftkit.strings`: string helpers:
  - `atoi` and `itoa` for integer parsing and printing;
  - `split`, which drops empty pieces, and `strtrim`;
  - `substr`, `strjoin`, `strdup` and `strlen`;
  - `strchr`, `strrchr` and `strnstr`, which return an index or `None`;
  - `strncmp`;
  - `striteri`, which updates a mutable sequence of characters in place, and `strmapi`;
  - `strlcpy` and `strlcat`. These return a `(string, reported_length)` pair.
- `ftkit.linked`: a singly linked list of `ListNode` objects. A list is its
  head node, or `None` when it is empty. `lst_add_front` and `lst_add_back`
  return the new head. The other functions are `lst_new`, `lst_size`,
  `lst_last`, `lst_iter`, `lst_map`, `lst_clear` and `lst_delone`. Iterating
  over a `ListNode` yields the contents from that node onward.
- `ftkit.output`: writes characters, strings, lines and integers to a text
  stream, standard output by default (`put_char`, `put_str`, `put_endl`,
  `put_nbr`).
- `ftkit.printf`: a minimal formatter for `%c %s %p %d %i %u %x %X %%`
  (`sprintf`, `printf`, `format_hex`, `format_pointer`).
  - `printf` returns the number of characters written.
  - `%s` of `None` prints `(null)`.
  - `%p` of `None` or 0 prints `(nil)`.
  - Integers wrap to 32 bits, or to 64 bits for `%p`.
  - An unknown conversion is copied through unchanged.
- `ftkit.line_reader`: `LineReader`, which reads a file descriptor or any
  object with `read()` one line at a time. It pulls data through a buffer of
  `buffer_size` units, 42 by default. Each line keeps its trailing newline,
  and the last line of the input may have none. A file descriptor yields
  `bytes`; a file-like object yields whatever its `read` returns.

## Installation

```
pip install .
```

## Examples

```python
from ftkit.strings import split, atoi, strlcpy
from ftkit.printf import sprintf

split("  hello  world ", " ")    # ['hello', 'world']
atoi("  -42abc")                 # -42
strlcpy("hello", 3)              # ('he', 5)
sprintf("%s is %x", "255", 255)  # '255 is ff'
```

Reading lines:

```python
from ftkit.line_reader import LineReader

with open("notes.txt") as handle:
    for line in LineReader(handle, 42):
        print(line, end="")
```

## Command line

```
ftkit-lines notes.txt
```

This prints every line of the file, each followed by an extra newline, so
lines that already end in a newline come out double-spaced.

It exits with status 1 in two cases:

- it is not given exactly one argument; it then prints a usage message;
- the file cannot be opened; it then prints an error message.

## Limits

- The formatter supports no flags, field widths or precisions.
- `ftkit-lines` is the only command; the other modules are used from Python.

## Running the tests

```
pip install .[test]
pytest
```