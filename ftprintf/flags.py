"""Conversion flags and the character table that drives the formatter."""

from __future__ import annotations

import enum

_FULL_RANGE = 1 << 64
_HALF_RANGE = 1 << 63


class Flag(enum.Flag):
    """State and attribute bits attached to format characters."""

    ALTERNATE = 0x1
    PRECISION = 0x2
    PADDING_LEFT = 0x4
    PADDING_ZERO = 0x8
    PADDING_RIGHT = 0x10
    SPACE = 0x20
    PLUS = 0x40
    MINUS = 0x80
    MINUS_SET = 0x100
    FROM_INT = 0x200
    FROM_STR = 0x400
    FROM_PTR = 0x800
    TO_HEX = 0x1000
    TO_UCHAR = 0x2000
    TO_UINT = 0x4000
    TO_INT = 0x8000
    TO_BIT = 0x10000
    TO_OCT = 0x20000
    USE_CAP = 0x40000
    FROM_UINT = 0x80000
    PRECISION_MODE = 0x100000
    PADDING_LEFT_MODE = 0x400000
    PADDING_RIGHT_MODE = 0x800000
    REGISTER_MODE = 0x1000000
    END_CONV_MODE = 0x2000000
    SWITCH_CONV_MODE = 0x4000000
    ORDINARY_MODE = 0x8000000
    CONVERSION_MODE = 0x10000000
    NO_MIN_WIDTH = 0x20000000


_END = Flag.END_CONV_MODE

_TABLE: dict[str, Flag] = {
    "%": Flag.SWITCH_CONV_MODE,
    "#": Flag.ALTERNATE,
    ".": Flag.PRECISION | Flag.PRECISION_MODE | Flag.NO_MIN_WIDTH,
    "0": Flag.PADDING_ZERO | Flag.PADDING_LEFT_MODE | Flag.NO_MIN_WIDTH,
    **{digit: Flag.REGISTER_MODE for digit in "123456789"},
    "-": Flag.PADDING_RIGHT | Flag.PADDING_RIGHT_MODE | Flag.NO_MIN_WIDTH,
    " ": Flag.SPACE,
    "+": Flag.PLUS,
    "c": Flag.FROM_INT | Flag.TO_UCHAR | _END,
    "b": Flag.FROM_INT | Flag.TO_BIT | _END,
    "d": Flag.FROM_INT | Flag.TO_INT | _END,
    "i": Flag.FROM_INT | Flag.TO_INT | _END,
    "o": Flag.FROM_INT | Flag.TO_UINT | _END,
    "u": Flag.FROM_INT | Flag.TO_UINT | _END,
    "x": Flag.FROM_INT | Flag.TO_HEX | _END,
    "X": Flag.FROM_INT | Flag.TO_HEX | Flag.USE_CAP | _END,
    "p": Flag.FROM_PTR | Flag.TO_HEX | _END,
    "s": Flag.FROM_STR | _END,
}


def char_flags(char: str) -> Flag:
    """Return the flags a single format character contributes."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return _TABLE.get(char, Flag(0))


def int_length(n: int, base: int) -> int:
    """Count the characters of ``n`` written in ``base``, a sign included.

    ``n`` is taken as a signed 64-bit integer, so larger values wrap.
    """
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    n = (n + _HALF_RANGE) % _FULL_RANGE - _HALF_RANGE
    length = 1
    if n < 0:
        length += 1
        n = -n
        if n == _HALF_RANGE:
            # Negating the most negative value overflows and stays negative.
            return length
    while n >= base:
        length += 1
        n //= base
    return length