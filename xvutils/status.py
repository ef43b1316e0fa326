"""Encoding and decoding of process exit statuses."""

from __future__ import annotations


def _int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def wifexited(status: int) -> bool:
    """True if the process ended by calling exit."""
    return (status & 0x7F) == 0


def wexitstatus(status: int) -> int:
    """The exit code passed to exit."""
    return (status & 0xFF00) >> 8


def wifsignaled(status: int) -> bool:
    """True if the process was killed by a trap."""
    return (status & 0x7F) != 0


def wexittrap(status: int) -> int:
    """The trap number that killed the process."""
    return (status & 0x7F) - 1


def encode_exit(code: int) -> int:
    """Status recorded when a process calls exit with ``code``."""
    return _int32(code << 8)


def encode_trap(trapno: int) -> int:
    """Status recorded when a process is killed by trap ``trapno``."""
    return _int32(trapno + 1)