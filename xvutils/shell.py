"""Command-line tokenizer and parser for the shell grammar.

Supports words, ``|`` pipes, ``;`` lists, ``&`` background jobs,
``<``, ``>`` and ``>>`` redirections and ``( )`` grouping.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from xvutils.constants import O_CREATE, O_RDONLY, O_WRONLY

MAXARGS = 10

_WHITESPACE = " \t\r\n\v"
_SYMBOLS = "<|>&;()"


class ShellSyntaxError(ValueError):
    """Raised when a command line cannot be parsed."""


@dataclass
class ExecCmd:
    """Run a program with arguments."""

    argv: list[str] = field(default_factory=list)


@dataclass
class RedirCmd:
    """Run ``cmd`` with descriptor ``fd`` reopened on ``file``."""

    cmd: "Command"
    file: str
    mode: int
    fd: int


@dataclass
class PipeCmd:
    """Connect the output of ``left`` to the input of ``right``."""

    left: "Command"
    right: "Command"


@dataclass
class ListCmd:
    """Run ``left`` then ``right``."""

    left: "Command"
    right: "Command"


@dataclass
class BackCmd:
    """Run ``cmd`` without waiting for it."""

    cmd: "Command"


Command = Union[ExecCmd, RedirCmd, PipeCmd, ListCmd, BackCmd]


def tokenize(line: str) -> list[tuple[str, str]]:
    """Split ``line`` into (kind, text) tokens.

    Kind is the symbol itself for ``| ( ) ; & < >``, ``+`` for ``>>`` and
    ``a`` for a word.
    """
    tokens: list[tuple[str, str]] = []
    i, end = 0, len(line)
    while True:
        while i < end and line[i] in _WHITESPACE:
            i += 1
        if i >= end:
            return tokens
        c = line[i]
        if c == ">" and line.startswith(">>", i):
            tokens.append(("+", ">>"))
            i += 2
        elif c in _SYMBOLS:
            tokens.append((c, c))
            i += 1
        else:
            start = i
            while i < end and line[i] not in _WHITESPACE and line[i] not in _SYMBOLS:
                i += 1
            tokens.append(("a", line[start:i]))


class _Parser:
    def __init__(self, tokens: list[tuple[str, str]]) -> None:
        self.tokens = tokens
        self.pos = 0

    def peek(self, kinds: str) -> bool:
        if self.pos >= len(self.tokens):
            return False
        # ">>" starts with '>' and so counts as one of the '>' tokens.
        first = self.tokens[self.pos][1][0]
        return first in kinds

    def next(self) -> tuple[str, str] | None:
        if self.pos >= len(self.tokens):
            return None
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def line(self) -> Command:
        cmd = self.pipe()
        while self.peek("&"):
            self.next()
            cmd = BackCmd(cmd)
        if self.peek(";"):
            self.next()
            cmd = ListCmd(cmd, self.line())
        return cmd

    def pipe(self) -> Command:
        cmd = self.exec()
        if self.peek("|"):
            self.next()
            cmd = PipeCmd(cmd, self.pipe())
        return cmd

    def redirs(self, cmd: Command) -> Command:
        while self.peek("<>"):
            kind, _ = self.next()
            target = self.next()
            if target is None or target[0] != "a":
                raise ShellSyntaxError("missing file for redirection")
            if kind == "<":
                cmd = RedirCmd(cmd, target[1], O_RDONLY, 0)
            else:
                cmd = RedirCmd(cmd, target[1], O_WRONLY | O_CREATE, 1)
        return cmd

    def block(self) -> Command:
        if not self.peek("("):
            raise ShellSyntaxError("parseblock")
        self.next()
        cmd = self.line()
        if not self.peek(")"):
            raise ShellSyntaxError("syntax - missing )")
        self.next()
        return self.redirs(cmd)

    def exec(self) -> Command:
        if self.peek("("):
            return self.block()
        node = ExecCmd()
        cmd: Command = self.redirs(node)
        while not self.peek("|)&;"):
            token = self.next()
            if token is None:
                break
            kind, text = token
            if kind != "a":
                raise ShellSyntaxError("syntax")
            node.argv.append(text)
            if len(node.argv) >= MAXARGS:
                raise ShellSyntaxError("too many args")
            cmd = self.redirs(cmd)
        return cmd


def parse_command(line: str) -> Command:
    """Parse a full command line into a command tree."""
    parser = _Parser(tokenize(line))
    cmd = parser.line()
    if parser.pos != len(parser.tokens):
        leftovers = " ".join(text for _, text in parser.tokens[parser.pos:])
        raise ShellSyntaxError(f"syntax: leftovers: {leftovers}")
    return cmd