# printfmt

`printfmt` builds text from a printf-style template. It follows the C rules
for flags, field width, precision and length modifiers. It also has a few
small helpers for numbers and strings, and one for reading lines.

## Formatting

```python
from printfmt.printf import sprintf, printf

sprintf("%5d|%-5s|%#x", 42, "ab", 255)   # '   42|ab   |0xff'
sprintf("%.3f", 3.14159)                  # '3.142'
sprintf("%08.3d", -7)                     # '    -007'

count = printf("%c%c\n", "h", "i")        # writes 'hi\n' to stdout and returns 3
```

`sprintf` returns the formatted text. `printf` writes that text to
standard output and returns the number of characters written.

These conversions are supported:

| Conversion | Output |
| --- | --- |
| `c` | a character |
| `s` | a string |
| `p` | a pointer value, as `0x` followed by hex digits |
| `d` and `i` | a signed integer |
| `o` | an octal integer |
| `u` | an unsigned integer |
| `x` and `X` | a hex integer |
| `f` | a floating-point number |
| `%` | a literal `%` |

- **Flags:** `-`, `0`, `+`, space and `#`.
- **Length modifiers:** `hh`, `h`, `l`, `ll` and `L`.

Integer arguments are narrowed to the width their modifier names: 32 bits with no modifier, 8 bits for `hh`, 16 bits for `h`, and 64 bits for `l` and `ll`.

For `%s`, `None` gives `(null)`. For `%c`, the argument can be a one-character string or an integer.

All conversions are rendered before any output is assembled, so a failure produces no output. These errors are raised:

- `printfmt.convert.ConversionError`, a subclass of `ValueError`, for an unknown conversion.
- `TypeError` when there are too few arguments.
- `ValueError` when `%f` is given a non-finite number.

Any extra arguments are ignored.

### Single conversions

You can also parse and render one specification at a time:

```python
from printfmt.spec import parse_spec, parse_template
from printfmt.convert import render, format_hex

spec = parse_spec("#08x")
format_hex(spec, 255)                                   # '0x0000ff'
[s.conversion for s in parse_template("%d and %s")]     # ['d', 's']
render(parse_spec("5s"), iter(["ab"]))                  # '   ab'
```

`Spec` holds the following fields:

- `text`
- `conversion`
- `flags`, a `Flags` object with `minus`, `plus`, `space`, `zero` and `pound`
- `width` and `has_width`
- `precision` and `has_precision`
- `length`, a `Length` value

`printfmt.convert` has one `format_*` function for each conversion. It also provides:

- `signed_arg` and `unsigned_arg`, which narrow a value to a length modifier.
- `decimal_digits`, which returns the fractional digits that `%f` uses.

## Number helpers

`printfmt.numconv` provides:

| Function | What it does |
| --- | --- |
| `atoi(text)` | Parses a decimal integer. The result wraps to 32 bits. |
| `atoi_base(text, base)` | Parses an integer in the given base. |
| `itoa_base(number, base, upper)` | Renders an integer in a base from 2 to 16. Negative numbers are only accepted in base 10. |
| `number_length(number)` | Counts the decimal characters, including the sign. |
| `power(base, exponent)` | Raises `base` to `exponent`. A negative exponent gives 0. |
| `next_number(text, stop)` | Reads a signed number up to a stop character. |

## String helpers

`printfmt.strutil` provides:

| Function | What it does |
| --- | --- |
| `split_words(text, separator)` | Splits the text and drops empty pieces. |
| `word_count(text, separator)` | Counts the words. |
| `trim(text)` | Strips surrounding whitespace. |
| `find_within(haystack, needle, limit)` | Returns the index of `needle` within the first `limit` characters, or -1. |
| `count_char(text, char)` | Counts one character. |
| `replace_char(text, old, new)` | Replaces one character. |
| `sort_ints(values)` | Returns the values in ascending order. |

## Reading lines

```python
import io
from printfmt.lines import LineReader, read_lines

reader = LineReader(io.StringIO("one\ntwo\n"))
reader.next_line()                  # 'one'
read_lines(io.StringIO("a\nb"))     # ['a', 'b']
```

`LineReader` reads the whole stream on the first request. It works with both text and binary streams. `next_line` returns `None` once the content is used up.

## What it does not do

`printfmt` is a library only. It has no command-line program.

## Tests

```
pip install -e .[test]
pytest
```