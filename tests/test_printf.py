import io

import pytest

from minitalk.printf import format_string, printf


def test_plain_text_is_unchanged():
    assert format_string("PID: \n") == "PID: \n"


def test_null_string_prints_null_marker():
    assert format_string("%s", None) == "(null)"


def test_string_conversion_inserts_text():
    assert format_string("[%s]", "Hello, World!") == "[Hello, World!]"


def test_percent_sign():
    assert format_string("100%%") == "100%"


def test_zero_pointer():
    assert format_string("%p", 0) == "0x0"


@pytest.mark.parametrize("address", [1, 15, 16, 0xDEADBEEF, 2**64 - 1])
def test_pointer_is_lowercase_hex_with_prefix(address):
    assert format_string("%p", address) == "0x" + format(address, "x")


def test_int_min_decimal():
    assert format_string("%d", -2147483648) == "-2147483648"


def test_decimal_wraps_like_32_bit_int():
    assert format_string("%i", 2**31) == "-2147483648"


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 2147483647])
def test_decimal_round_trip(n):
    assert int(format_string("%d", n)) == n
    assert format_string("%i", n) == format_string("%d", n)


def test_unsigned_of_negative_wraps():
    assert int(format_string("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 9, 10, 15, 16, 255, 4096, 2**32 - 1])
def test_hex_matches_builtin_format(n):
    assert format_string("%x", n) == format(n, "x")
    assert format_string("%X", n) == format(n, "X")
    assert int(format_string("%x", n), 16) == n


def test_character_from_string_and_code():
    assert format_string("%c%c", "A", ord("B")) == "AB"


def test_character_code_keeps_low_byte():
    assert format_string("%c", 256 + ord("x")) == "x"


def test_unknown_conversion_is_skipped_without_consuming():
    assert format_string("a%zb%d", 7) == "ab7"


def test_multiple_conversions_in_order():
    assert format_string("%s=%d (%x)", "n", 255, 255) == "n=255 (ff)"


def test_trailing_percent_raises():
    with pytest.raises(ValueError):
        format_string("oops %")


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d and %d", 1)


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        format_string("%d", "nope")
    with pytest.raises(TypeError):
        format_string("%s", 3)


def test_printf_writes_to_stream_and_returns_length():
    out = io.StringIO()
    count = printf("PID: %d\n", 1234, stream=out)
    assert out.getvalue() == "PID: 1234\n"
    assert count == len(out.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s%%", "ok")
    captured = capsys.readouterr().out
    assert captured == "ok%"
    assert count == len(captured)


def test_printf_error_writes_nothing():
    out = io.StringIO()
    with pytest.raises(ValueError):
        printf("abc%", stream=out)
    assert out.getvalue() == ""