import pytest

from ftprintf.formatter import Formatter, format_string, ft_printf


@pytest.mark.parametrize(
    "fmt, arg",
    [
        ("%d", 42),
        ("%d", -42),
        ("%i", -7),
        ("%5d", 42),
        ("%5d", -42),
        ("%05d", 42),
        ("%05d", -42),
        ("%-5d|", 42),
        ("%-5d|", -42),
        ("%.3d", 42),
        ("%.3d", -42),
        ("%.3d", 0),
        ("%8.3d", 42),
        ("%8.3d", -42),
        ("% d", 42),
        ("% d", -42),
        ("%+d", 42),
        ("%+5d", 42),
        ("%+.3d", 42),
        ("%x", 255),
        ("%X", 255),
        ("%#x", 255),
        ("%#10x", 255),
        ("%u", 7),
        ("%c", 65),
        ("%5c", 65),
        ("%s", "abc"),
        ("%.2s", "abc"),
        ("%10s", "abc"),
        ("%-10s|", "abc"),
        ("%10.2s", "abc"),
        ("%-10.2s|", "abc"),
    ],
)
def test_matches_standard_formatting(fmt, arg):
    assert format_string(fmt, arg) == fmt % arg


def test_plain_text_passes_through():
    assert format_string("hello, world") == "hello, world"


def test_double_percent():
    assert format_string("100%%") == "100%%" % ()


def test_trailing_percent_is_dropped():
    assert format_string("abc%") == "abc"


def test_unsigned_wraps_negative():
    assert format_string("%u", -1) == "%u" % (2**32 - 1)


def test_hex_wraps_negative():
    assert format_string("%x", -1) == "%x" % (2**32 - 1)


def test_o_prints_decimal():
    assert format_string("%o", 8) == format_string("%u", 8)


def test_binary():
    assert format_string("%b", 5) == format(5, "b")
    assert format_string("%b", 0) == format(0, "b")


def test_alternate_zero_has_no_prefix():
    assert format_string("%#x", 0) == format_string("%x", 0)


def test_alternate_on_decimal_adds_hex_prefix():
    assert format_string("%#d", 10) == "0x" + format_string("%d", 10)


def test_zero_precision_hides_zero():
    assert format_string("%.0d", 0) == ""


def test_int_argument_wraps_to_32_bits():
    assert format_string("%d", 2**32 + 5) == format_string("%d", 5)


def test_char_accepts_single_character_string():
    assert format_string("%c", "Z") == "Z"


def test_null_string():
    assert format_string("%s", None) == "(null)"
    assert format_string("%8s", None) == "%8s" % "(null)"


def test_pointer_values():
    assert format_string("%p", 255) == "%#x" % 255
    assert format_string("%p", None) == "%#x" % 0
    assert format_string("%p", -1) == "%#x" % (2**64 - 1)


def test_pointer_of_object_uses_identity():
    obj = object()
    assert format_string("%p", obj) == "%#x" % id(obj)


def test_unknown_conversion_characters_are_skipped():
    assert format_string("%qd", 3) == format_string("%d", 3)


def test_width_before_percent_carries_over():
    assert format_string("%5%%d", 7) == "%" + format_string("%5d", 7)


def test_nul_ends_the_format():
    assert format_string("ab\0cd") == "ab"


def test_several_conversions():
    fmt = "%s=%d (%x)"
    args = ("n", -3, 48879)
    assert format_string(fmt, *args) == fmt % args


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d and %d", 1)


def test_string_conversion_rejects_non_string():
    with pytest.raises(TypeError):
        format_string("%s", 12)


def test_int_conversion_rejects_non_int():
    with pytest.raises(TypeError):
        format_string("%d", 1.5)


def test_feed_incrementally_matches_format_string():
    fmt = "[%-6s|%+4d]"
    formatter = Formatter(["ab", 9])
    for char in fmt:
        formatter.feed(char)
    assert formatter.getvalue() == format_string(fmt, "ab", 9)


def test_feed_rejects_multiple_characters():
    formatter = Formatter([])
    with pytest.raises(ValueError):
        formatter.feed("ab")


def test_ft_printf_writes_and_counts(capsys):
    count = ft_printf("%d-%s", 5, "x")
    out = capsys.readouterr().out
    assert out == "%d-%s" % (5, "x")
    assert count == len(out)