import pytest

from xvutils.status import (
    encode_exit,
    encode_trap,
    wexitstatus,
    wexittrap,
    wifexited,
    wifsignaled,
)


@pytest.mark.parametrize("code", [0, 1, 2, 3, 42, 255])
def test_exit_round_trip(code):
    status = encode_exit(code)
    assert wifexited(status)
    assert not wifsignaled(status)
    assert wexitstatus(status) == code


def test_negative_exit_code_keeps_low_byte():
    assert wexitstatus(encode_exit(-1)) == 255


@pytest.mark.parametrize("trapno", [0, 6, 13, 14, 64])
def test_trap_round_trip(trapno):
    status = encode_trap(trapno)
    assert wifsignaled(status)
    assert not wifexited(status)
    assert wexittrap(status) == trapno


def test_exited_and_signaled_are_exclusive():
    for status in range(0, 0x10000, 37):
        assert wifexited(status) != wifsignaled(status)