"""Small text utilities: cat, wc, echo and ls name formatting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, TextIO

_CHUNK = 512
_DIRSIZ = 14
_WHITESPACE = " \r\t\n\v"


def cat(stream: TextIO, out: TextIO) -> None:
    """Copy everything from ``stream`` to ``out``."""
    while chunk := stream.read(_CHUNK):
        out.write(chunk)


@dataclass(frozen=True)
class WordCount:
    """Line, word and character counts of a stream."""

    lines: int
    words: int
    chars: int


def wc(stream: TextIO) -> WordCount:
    """Count lines, words and characters in ``stream``."""
    lines = words = chars = 0
    in_word = False
    while chunk := stream.read(_CHUNK):
        for c in chunk:
            chars += 1
            if c == "\n":
                lines += 1
            if c in _WHITESPACE:
                in_word = False
            elif not in_word:
                words += 1
                in_word = True
    return WordCount(lines, words, chars)


def echo(args: Sequence[str]) -> str:
    """The text echo prints for ``args``: space separated, newline ended."""
    if not args:
        return ""
    return " ".join(args) + "\n"


def fmtname(path: str) -> str:
    """Last component of ``path``, blank-padded to the directory name width."""
    name = path.rsplit("/", 1)[-1]
    if len(name) >= _DIRSIZ:
        return name
    return name.ljust(_DIRSIZ)