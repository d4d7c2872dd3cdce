import io

import pytest

from sigtalk.printf import (
    format_hex,
    format_pointer,
    format_signed,
    format_string,
    format_unsigned,
    printf,
    sprintf,
)


@pytest.mark.parametrize("value", [0, 1, 9, 10, 15, 16, 255, 4096, 0xDEADBEEF, 0xFFFFFFFF])
def test_format_hex_round_trip(value):
    assert int(format_hex(value, False), 16) == value
    assert int(format_hex(value, True), 16) == value


def test_format_hex_case():
    assert format_hex(0xABCDEF, False) == format(0xABCDEF, "x")
    assert format_hex(0xABCDEF, True) == format(0xABCDEF, "X")


def test_format_hex_wraps_negative_to_unsigned():
    assert int(format_hex(-1, False), 16) == 0xFFFFFFFF


def test_format_pointer_null():
    assert format_pointer(0) == "(nil)"
    assert format_pointer(None) == "(nil)"


@pytest.mark.parametrize("address", [1, 0x7FFE1234, 0xFFFFFFFFFFFF])
def test_format_pointer_round_trip(address):
    text = format_pointer(address)
    assert text.startswith("0x")
    assert int(text[2:], 16) == address
    assert text == text.lower()


def test_format_string():
    assert format_string(None) == "(null)"
    assert format_string("hello") == "hello"
    assert format_string("") == ""


@pytest.mark.parametrize("value", [0, 7, 42, 2147483647, 4294967295])
def test_format_unsigned_round_trip(value):
    assert int(format_unsigned(value)) == value


def test_format_unsigned_wraps_negative():
    assert int(format_unsigned(-1)) == 0xFFFFFFFF


@pytest.mark.parametrize("value", [0, 5, -5, 123456, -2147483647, 2147483647])
def test_format_signed_round_trip(value):
    assert int(format_signed(value)) == value


def test_format_signed_int_min():
    assert format_signed(-2147483648) == "-2147483648"


def test_format_signed_wraps_to_32_bits():
    assert int(format_signed(0xFFFFFFFF)) == -1


def test_sprintf_plain_text():
    assert sprintf("abc def") == "abc def"


def test_sprintf_percent_literal():
    assert sprintf("100%%") == "100%"


def test_sprintf_trailing_percent_is_literal():
    assert sprintf("50%") == "50%"


def test_sprintf_mixed_conversions():
    result = sprintf("%s=%d %c %u", "n", -12, "z", 7)
    assert result == "n=" + format_signed(-12) + " z " + format_unsigned(7)


def test_sprintf_hex_and_pointer():
    result = sprintf("%x|%X|%p|%p", 255, 255, 0, 4096)
    parts = result.split("|")
    assert parts[0] == format_hex(255, False)
    assert parts[1] == format_hex(255, True)
    assert parts[2] == "(nil)"
    assert int(parts[3][2:], 16) == 4096


def test_sprintf_null_string():
    assert sprintf("[%s]", None) == "[(null)]"


def test_sprintf_char_from_int():
    assert sprintf("%c", ord("Q")) == "Q"


def test_sprintf_unknown_conversion_emits_nothing_and_keeps_args():
    assert sprintf("a%qb%d", 3) == "ab3"


def test_sprintf_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("Server PID is: %i\n", 4242, stream=stream)
    written = stream.getvalue()
    assert written == sprintf("Server PID is: %i\n", 4242)
    assert count == len(written)


def test_printf_counts_null_string():
    stream = io.StringIO()
    count = printf("%s", None, stream=stream)
    assert stream.getvalue() == "(null)"
    assert count == len("(null)")