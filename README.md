# fmtkit

A small formatting toolkit built around a printf-style formatter that
understands exactly nine conversions, plus string, byte-buffer,
file-descriptor and linked-list helpers. It has no dependencies outside
the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Formatting

`fmtkit.formatter.format_string(fmt, *args)` returns the formatted text.
`fmtkit.formatter.print_format(fmt, *args, file=None)` writes it to `file`
(standard output when `file` is `None`) and returns the number of
characters written.

| Conversion | Meaning                                                      |
|------------|--------------------------------------------------------------|
| `%c`       | a one-character string, or an int code narrowed to a byte   |
| `%s`       | a string; `None` gives `(null)`                              |
| `%p`       | `0x` and the address in lowercase hex; `None` or `0` gives `(nil)`; an int is the address, any other object uses its `id()` |
| `%d`, `%i` | the value taken as a signed 32-bit decimal                   |
| `%u`       | the value taken as an unsigned 32-bit decimal                |
| `%x`, `%X` | the value taken as unsigned 32-bit, in lower or upper hex    |
| `%%`       | a literal percent sign                                       |

A `%` followed by any other character is copied to the output as it
stands, together with that character. A `%` at the very end of the format
raises `ValueError`; running out of arguments raises `TypeError`; surplus
arguments are ignored. A wrong argument type raises `TypeError`.

```python
from fmtkit.formatter import format_string, print_format

format_string("Hola%cAD%cIOS", "a", "i")   # 'HolaaADiIOS'
format_string("%u %x %X", -1, 255, 255)    # '4294967295 ff FF'
format_string("%s %p", None, None)         # '(null) (nil)'
count = print_format("%s and %d%%\n", "text", 42)   # 12
```

Each conversion is also available on its own: `format_char`, `format_str`,
`format_decimal`, `format_unsigned`, `format_pointer`, and
`format_hex(value, upper=False)`. Used directly, `format_hex` takes the
value as an unsigned 64-bit integer.

## Other helpers

- `fmtkit.chars`: ASCII classification (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`) and case mapping (`to_upper`,
  `to_lower`); each takes a one-character string or an int code, and the
  case mappers return the same kind they were given. `atoi(text)` skips
  leading whitespace, reads one optional sign and the digits that follow,
  returns 0 when there are none, and wraps the result to a signed 32-bit
  integer. `itoa(number)` renders a signed 32-bit integer and raises
  `OverflowError` outside that range.
- `fmtkit.strings`: `split(text, sep)` drops empty words;
  `find_char` and `rfind_char` return an index or `None` (searching for
  `"\0"` finds the end of the text); `compare_prefix(first, second, limit)`
  returns the code difference of the first mismatch within `limit`;
  `find_within(haystack, needle, limit)` finds a needle lying wholly in the
  first `limit` characters; `trim`, `substr`, `map_indexed(text, func)`
  with `func(index, char)`; `bounded_copy(source, size)` and
  `bounded_concat(dest, source, size)` return the resulting text and the
  length the full result would have had.
- `fmtkit.memory`: work on `bytearray` or `memoryview` buffers: `fill`,
  `zero`, `allocate_zeroed`, `find_byte`, `compare`, `copy_bytes`, and
  `move` for overlapping ranges within one buffer. Spans that run past
  the end of a buffer, and negative counts, raise `ValueError`.
- `fmtkit.fdio`: writing to a raw file descriptor with `put_char`,
  `put_str`, `put_endl` and `put_number`; text is encoded as UTF-8 and
  each returns the number of bytes written.
- `fmtkit.linked`: `LinkedList(items=())` with `push_front`, `push_back`,
  `last` (or `None` when empty), `for_each`, `map` (returns a new list),
  `clear(release=None)` (passes each removed value to `release`), and
  support for `len()` and iteration.

## What it does not do

The formatter supports no flags, field widths, precisions or length
modifiers, and there is no command-line tool: everything is used from
Python code.