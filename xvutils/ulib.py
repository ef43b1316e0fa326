"""Small user-library helpers."""

from __future__ import annotations

import re
from typing import TextIO

_LEADING_DIGITS = re.compile(r"[0-9]*")


def atoi(text: str) -> int:
    """Parse leading ASCII digits of ``text``; no sign or whitespace is accepted."""
    digits = _LEADING_DIGITS.match(text).group()
    value = int(digits) if digits else 0
    return ((value + 2**31) % 2**32) - 2**31


def gets(stream: TextIO, limit: int) -> str:
    """Read one line of at most ``limit - 1`` characters, keeping the terminator."""
    chars: list[str] = []
    while len(chars) + 1 < limit:
        c = stream.read(1)
        if not c:
            break
        chars.append(c)
        if c in "\n\r":
            break
    return "".join(chars)