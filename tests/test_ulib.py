import io

import pytest

from xvutils.ulib import atoi, gets


@pytest.mark.parametrize("text,expected", [("123", 123), ("123abc", 123), ("7", 7)])
def test_atoi_leading_digits(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("text", ["", "-5", " 7", "abc"])
def test_atoi_without_leading_digit_is_zero(text):
    assert atoi(text) == 0


def test_gets_reads_one_line():
    stream = io.StringIO("hello\nworld")
    assert gets(stream, 100) == "hello\n"
    assert gets(stream, 100) == "world"
    assert gets(stream, 100) == ""


def test_gets_respects_limit():
    stream = io.StringIO("hello\n")
    assert gets(stream, 4) == "hel"
    assert gets(stream, 4) == "lo\n"


def test_gets_stops_at_carriage_return():
    assert gets(io.StringIO("cd x\rmore"), 50) == "cd x\r"


def test_gets_tiny_limit_reads_nothing():
    stream = io.StringIO("abc")
    assert gets(stream, 1) == ""
    assert stream.read() == "abc"