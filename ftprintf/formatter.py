"""A character-driven printf-style formatter."""

from __future__ import annotations

import enum
import sys
from collections.abc import Iterable
from itertools import takewhile
from typing import Any

from .flags import Flag, char_flags, int_length

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = (1 << 64) - 1
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_NULL_TEXT = "(null)"
_SIGNED = Flag.MINUS | Flag.PLUS


class _Sign(enum.Enum):
    BEFORE = 1
    AFTER = 0
    NOWHERE = -1


def _c_int(value: Any) -> int:
    """Coerce an argument to a signed 32-bit integer."""
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"expected an integer or a single character, got {value!r}")
        value = ord(value)
    if not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _pointer(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, int):
        return value & _POINTER_MASK
    return id(value) & _POINTER_MASK


def _digits(value: int, bits: int, alphabet: str) -> str:
    if value == 0:
        return alphabet[0]
    mask = (1 << bits) - 1
    out = []
    while value:
        out.append(alphabet[value & mask])
        value >>= bits
    return "".join(reversed(out))


class Formatter:
    """Consumes format characters one at a time and collects the output."""

    def __init__(self, args: Iterable[Any]) -> None:
        self._args = iter(args)
        self._out: list[str] = []
        self._arg_str = _NULL_TEXT
        self._reset()

    def _reset(self) -> None:
        self._datas = Flag.ORDINARY_MODE
        self._char = "\0"
        self._value = 0
        self._precision = 0
        self._padding_left = 0
        self._padding_right = 0
        self._padding_char = " "
        self._arg_len = 0
        self._arg_int = 0

    def getvalue(self) -> str:
        """Return everything written so far."""
        return "".join(self._out)

    def feed(self, char: str) -> None:
        """Process one character of the format."""
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        self._char = char
        fresh = char_flags(char)
        datas = self._datas
        if (fresh & Flag.PADDING_LEFT_MODE) and (
            datas & (Flag.REGISTER_MODE | Flag.PRECISION_MODE | Flag.PADDING_RIGHT_MODE)
        ):
            fresh = Flag.REGISTER_MODE
        elif not (fresh & Flag.REGISTER_MODE) and (datas & Flag.REGISTER_MODE):
            datas &= ~Flag.REGISTER_MODE
        datas |= fresh
        self._datas = datas

        if datas & Flag.SWITCH_CONV_MODE:
            if datas & Flag.CONVERSION_MODE:
                self._put(char)
            self._datas = datas ^ (
                Flag.ORDINARY_MODE | Flag.CONVERSION_MODE | Flag.SWITCH_CONV_MODE
            )
        elif datas & Flag.ORDINARY_MODE:
            self._datas = Flag.ORDINARY_MODE
            self._put(char)
        elif datas & Flag.END_CONV_MODE:
            self._take_argument()
            self._emit()
            self._reset()
        elif datas & (Flag.CONVERSION_MODE | Flag.REGISTER_MODE):
            self._register_digit()

    def _put(self, text: str) -> None:
        self._out.append(text)

    def _next_arg(self) -> Any:
        try:
            return next(self._args)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    def _register_digit(self) -> None:
        if not "0" <= self._char <= "9":
            return
        digit = ord(self._char) - ord("0")
        datas = self._datas
        if not datas & Flag.NO_MIN_WIDTH:
            self._padding_left = self._padding_left * 10 + digit
        elif datas & Flag.PRECISION_MODE:
            self._precision = self._precision * 10 + digit
        elif datas & Flag.PADDING_LEFT_MODE:
            self._padding_left = self._padding_left * 10 + digit
        elif datas & Flag.PADDING_RIGHT_MODE:
            self._padding_right = self._padding_right * 10 + digit

    def _take_argument(self) -> None:
        datas = self._datas
        if datas & Flag.FROM_INT:
            self._arg_int = _c_int(self._next_arg())
            self._value = self._arg_int & _UINT_MASK
            if datas & Flag.TO_INT and self._arg_int < 0:
                self._datas |= Flag.MINUS
        elif datas & Flag.FROM_STR:
            arg = self._next_arg()
            if arg is None:
                arg = _NULL_TEXT
            elif not isinstance(arg, str):
                raise TypeError(f"expected a string, got {type(arg).__name__}")
            self._arg_str = arg.partition("\0")[0]
        elif datas & Flag.FROM_PTR:
            self._value = _pointer(self._next_arg())

    def _measure(self) -> None:
        datas = self._datas
        unsigned = self._arg_int & _UINT_MASK
        length = int_length(self._value, 16) + 2
        if datas & Flag.FROM_PTR and self._value == _POINTER_MASK:
            length = 18
        elif datas & Flag.TO_HEX and not datas & Flag.FROM_PTR:
            length = int_length(unsigned, 16)
        elif datas & Flag.TO_INT:
            length = int_length(self._arg_int, 10)
        elif datas & Flag.TO_UINT:
            length = int_length(unsigned, 10)
        elif datas & Flag.TO_BIT:
            length = int_length(unsigned, 2)
        elif datas & Flag.TO_OCT:
            length = int_length(unsigned, 8)
        elif datas & Flag.FROM_STR:
            length = len(self._arg_str)
            if datas & Flag.PRECISION and self._precision < length:
                length = self._precision
        elif datas & Flag.TO_UCHAR:
            length = 1
        self._arg_len = length

    def _adjust_padding(self) -> None:
        datas = self._datas
        signed = bool(datas & _SIGNED)
        if datas & Flag.PADDING_ZERO and not datas & Flag.PRECISION:
            self._padding_char = "0"
        if datas & Flag.PRECISION and self._precision == 0 and self._arg_int == 0:
            self._arg_len = 0
        if self._precision > self._arg_len and datas & Flag.FROM_STR:
            self._precision = self._arg_len
        if self._padding_left:
            if signed:
                self._padding_left -= 1
            if datas & Flag.ALTERNATE:
                self._padding_left -= 2
        if self._padding_right and not datas & Flag.FROM_STR:
            if self._precision < self._arg_len:
                self._padding_right -= self._arg_len
            else:
                self._padding_right -= self._precision
            if signed and self._precision >= self._arg_len:
                self._padding_right -= 1

    def _put_sign(self) -> None:
        if self._datas & Flag.MINUS:
            self._put("-")
        elif self._datas & Flag.PLUS:
            self._put("+")

    def _pad(self, count: int, sign: _Sign, fill: str) -> None:
        if sign is _Sign.AFTER and fill == "0":
            sign = _Sign.BEFORE
        if sign is _Sign.BEFORE:
            self._put_sign()
        if sign is not _Sign.NOWHERE and self._datas & Flag.MINUS:
            count += 1
        if self._datas & Flag.SPACE and self._arg_int >= 0:
            self._put(" ")
            self._datas &= ~Flag.SPACE
            count -= 1
        if count > 0:
            self._put(fill * count)
        if sign is _Sign.AFTER:
            self._put_sign()

    def _pad_left(self) -> None:
        signed = bool(self._datas & _SIGNED)
        if self._precision and self._padding_left:
            if self._precision < self._arg_len:
                if signed:
                    self._padding_left += 1
                self._pad(self._padding_left - self._arg_len, _Sign.NOWHERE, " ")
            else:
                self._pad(self._padding_left - self._precision, _Sign.NOWHERE, " ")
            if signed:
                self._padding_left += 1
            if self._datas & Flag.ALTERNATE:
                self._padding_left += 2
            self._pad(self._precision - self._arg_len, _Sign.BEFORE, "0")
        if self._padding_left and not self._precision:
            self._pad(self._padding_left - self._arg_len, _Sign.AFTER, self._padding_char)
        if self._precision and not self._padding_left:
            self._pad(self._precision - self._arg_len, _Sign.BEFORE, "0")
        if not self._precision and not self._padding_left:
            self._pad(-1, _Sign.BEFORE, ".")

    def _prefix(self) -> None:
        datas = self._datas
        if datas & Flag.FROM_STR:
            return
        if (datas & Flag.ALTERNATE and self._arg_int != 0) or datas & Flag.FROM_PTR:
            self._put("0X" if datas & Flag.USE_CAP else "0x")

    def _argument(self) -> None:
        datas = self._datas
        if datas & Flag.FROM_INT and self._arg_int == 0 and self._arg_len == 0:
            return
        if datas & Flag.TO_INT:
            self._put(str(abs(self._arg_int)))
        elif datas & Flag.TO_UINT:
            self._put(str(self._arg_int & _UINT_MASK))
        elif datas & Flag.TO_HEX:
            alphabet = _HEX_UPPER if datas & Flag.USE_CAP else _HEX_LOWER
            self._put(_digits(self._value, 4, alphabet))
        elif datas & Flag.TO_BIT:
            self._put(_digits(self._value, 1, _HEX_LOWER))
        elif datas & Flag.TO_OCT:
            self._put(_digits(self._value, 2, _HEX_LOWER))
        elif datas & Flag.FROM_STR:
            if datas & Flag.PRECISION:
                self._put(self._arg_str[: self._arg_len])
                # The counted copy leaves the length one below zero.
                self._arg_len = -1
            else:
                self._put(self._arg_str)
        elif datas & Flag.TO_UCHAR:
            self._put(chr(self._arg_int & 0xFF))

    def _emit(self) -> None:
        self._measure()
        self._adjust_padding()
        if self._padding_right and self._datas & Flag.SPACE and self._arg_int > 0:
            self._padding_right -= 1
        self._pad_left()
        self._prefix()
        self._argument()
        from_str = bool(self._datas & Flag.FROM_STR)
        if self._padding_right and from_str and self._precision:
            self._padding_right -= self._precision
        elif self._padding_right and from_str:
            self._padding_right -= self._arg_len
        self._pad(self._padding_right, _Sign.NOWHERE, " ")


def format_string(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text."""
    formatter = Formatter(args)
    for char in takewhile(lambda c: c != "\0", fmt):
        formatter.feed(char)
    return formatter.getvalue()


def ft_printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)