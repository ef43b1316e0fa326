"""Line filter supporting the ^ . * $ regular-expression operators."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

_BUFSIZE = 1024


def _match_star(c: str, pattern: str, pi: int, text: str, ti: int) -> bool:
    while True:
        if _match_here(pattern, pi, text, ti):
            return True
        if ti < len(text) and (text[ti] == c or c == "."):
            ti += 1
        else:
            return False


def _match_here(pattern: str, pi: int, text: str, ti: int) -> bool:
    while True:
        if pi == len(pattern):
            return True
        if pi + 1 < len(pattern) and pattern[pi + 1] == "*":
            return _match_star(pattern[pi], pattern, pi + 2, text, ti)
        if pattern[pi] == "$" and pi + 1 == len(pattern):
            return ti == len(text)
        if ti < len(text) and (pattern[pi] == "." or pattern[pi] == text[ti]):
            pi += 1
            ti += 1
            continue
        return False


def match(pattern: str, text: str) -> bool:
    """True if ``pattern`` matches anywhere in ``text``."""
    if pattern.startswith("^"):
        return _match_here(pattern, 1, text, 0)
    return any(_match_here(pattern, 0, text, start) for start in range(len(text) + 1))


def grep(pattern: str, stream: TextIO, out: TextIO) -> None:
    """Write to ``out`` every complete line of ``stream`` that matches ``pattern``.

    Input is consumed through a fixed-size buffer: a final line without a
    newline is never printed, and a buffer filled without any newline is
    discarded.
    """
    pending = ""
    while True:
        chunk = stream.read(_BUFSIZE - 1 - len(pending))
        if not chunk:
            break
        pending += chunk
        *lines, rest = pending.split("\n")
        for line in lines:
            if match(pattern, line):
                out.write(line + "\n")
        pending = rest if lines else ""


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``grep pattern [file ...]``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        sys.stderr.write("usage: grep pattern [file ...]\n")
        return 0
    pattern, paths = args[0], args[1:]
    if not paths:
        grep(pattern, sys.stdin, sys.stdout)
        return 0
    for path in paths:
        try:
            stream = open(path, encoding="utf-8", errors="replace", newline="")
        except OSError:
            sys.stdout.write(f"grep: cannot open {path}\n")
            return 0
        with stream:
            grep(pattern, stream, sys.stdout)
    return 0