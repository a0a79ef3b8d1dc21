# ftprintf

A compact printf-style formatter. A small state machine reads the format
string one character at a time. Ordinary characters are copied to the
output. Each `%` sequence is filled in from the arguments that follow the
format. Formatting stops at the first NUL character (`"\0"`) in the format.

## Conversions

| Spec     | Argument                                   | Output                                    |
|----------|--------------------------------------------|-------------------------------------------|
| `c`      | int, or a one-character str                | the character for the low byte            |
| `s`      | str or `None`                              | the text (`None` prints `(null)`)         |
| `p`      | int, `None` (taken as 0), or another object (its `id()`) | `0x` followed by lowercase hex |
| `d`, `i` | int                                        | signed decimal                            |
| `u`, `o` | int                                        | unsigned 32-bit decimal                   |
| `x`, `X` | int                                        | lower- or upper-case hex                  |
| `b`      | int                                        | binary                                    |
| `%%`     | none                                       | a literal `%`                             |

Integer arguments are wrapped to 32 bits, as a C `int` would be. A string
argument is cut at its first NUL character.

The flags `#`, `0`, `-`, ` ` and `+` are accepted, along with a field width
and a `.precision`. Flags, width and precision follow this formatter's own
rules, and in some combinations the output is not what a C `printf` would
produce.

## Usage

```python
from ftprintf.formatter import format_string, ft_printf

text = format_string("%5d|%-4s|%#x", 42, "ab", 255)
# '   42|ab  |0xff'

count = ft_printf("%s has %d items\n", "cart", 3)
# writes to standard output and returns the number of characters written
```

`format_string(fmt, *args)` returns the formatted text.
`ft_printf(fmt, *args)` writes the same text to standard output, flushes it,
and returns its length.

`TypeError` is raised when the format needs more arguments than were given,
or when an argument has the wrong type for its conversion.

For finer control, build a `Formatter` from an iterable of arguments. Call
`feed(char)` once for each character of the format, then call `getvalue()`
to get everything written so far. `feed` raises `ValueError` if it is given
anything other than a single character.

The parser uses a flag table, which is available through
`ftprintf.flags.char_flags(char)`. That function returns the `Flag` value
that a format character contributes. `ftprintf.flags.int_length(n, base)`
returns the number of characters that `n` needs in the given base, with one
more for a minus sign. It treats `n` as a signed 64-bit integer.

## What it does not do

- There is no command-line program. The package is a library only.
- Floating-point conversions (`f`, `e`, `g`) are not supported.
- Length modifiers such as `l` or `h` are not supported.
- A `*` width or precision taken from the arguments is not supported.

## Running the tests

```
pip install -e .[test]
pytest
```