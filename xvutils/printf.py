"""Minimal formatted output understanding %d, %x, %p, %s, %c and %%."""

from __future__ import annotations

from typing import Any, TextIO

_DIGITS = "0123456789ABCDEF"


def _format_int(value: int, base: int, signed: bool) -> str:
    value &= 0xFFFFFFFF
    negative = False
    if signed and value >= 0x80000000:
        negative = True
        value = 0x100000000 - value
    digits = []
    while True:
        value, rem = divmod(value, base)
        digits.append(_DIGITS[rem])
        if value == 0:
            break
    if negative:
        digits.append("-")
    return "".join(reversed(digits))


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text."""
    values = iter(args)

    def next_arg() -> Any:
        try:
            return next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    out: list[str] = []
    chars = iter(fmt)
    for c in chars:
        if c != "%":
            out.append(c)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "d":
            out.append(_format_int(int(next_arg()), 10, True))
        elif spec in ("x", "p"):
            out.append(_format_int(int(next_arg()), 16, False))
        elif spec == "s":
            s = next_arg()
            out.append("(null)" if s is None else str(s))
        elif spec == "c":
            ch = next_arg()
            out.append(ch if isinstance(ch, str) else chr(int(ch) & 0xFF))
        elif spec == "%":
            out.append("%")
        else:
            out.append("%" + spec)
    return "".join(out)


def printf(stream: TextIO, fmt: str, *args: Any) -> None:
    """Write formatted output to ``stream``."""
    stream.write(sprintf(fmt, *args))