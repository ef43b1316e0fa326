import io

import pytest

from xvutils.printf import printf, sprintf


def test_decimal():
    assert sprintf("%d", 42) == "42"
    assert sprintf("%d", -42) == "-42"


def test_hex_uses_uppercase_digits():
    assert sprintf("%x", 255) == "FF"


def test_hex_is_unsigned():
    assert sprintf("%x", -1) == "FFFFFFFF"


def test_pointer_matches_hex():
    assert sprintf("%p", 4096) == sprintf("%x", 4096)


def test_decimal_wraps_to_32_bits():
    assert sprintf("%d", 2**32 + 7) == "7"


def test_string_and_null():
    assert sprintf("cat: cannot open %s\n", "README") == "cat: cannot open README\n"
    assert sprintf("%s", None) == "(null)"


def test_char():
    assert sprintf("%c%c", 65, "b") == "Ab"


def test_percent_and_unknown():
    assert sprintf("100%%") == "100%"
    assert sprintf("%q") == "%q"


def test_trailing_percent_is_dropped():
    assert sprintf("abc%") == "abc"


def test_date_format():
    assert sprintf("%d/%d/%d\n", 4, 5, 2024) == "4/5/2024\n"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_printf_writes_to_stream():
    out = io.StringIO()
    printf(out, "%s %d %d %d\n", "name", 2, 3, 512)
    assert out.getvalue() == "name 2 3 512\n"