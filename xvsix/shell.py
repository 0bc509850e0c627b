"""Command-line parser for the shell: pipes, lists, background jobs and redirection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from .params import OpenFlag

MAXARGS = 10

WHITESPACE = " \t\r\n\v"
SYMBOLS = "<|>&;()"


class ShellSyntaxError(ValueError):
    """Raised when a command line cannot be parsed."""

    def __init__(self, message, leftover=None):
        super().__init__(message)
        self.leftover = leftover


@dataclass
class ExecCmd:
    """Run a program with arguments."""

    argv: List[str] = field(default_factory=list)


@dataclass
class RedirCmd:
    """Run a command with one file descriptor redirected to a file."""

    cmd: "Command"
    file: str
    mode: OpenFlag
    fd: int


@dataclass
class PipeCmd:
    """Connect the output of one command to the input of another."""

    left: "Command"
    right: "Command"


@dataclass
class ListCmd:
    """Run one command, wait for it, then run the next."""

    left: "Command"
    right: "Command"


@dataclass
class BackCmd:
    """Run a command without waiting for it."""

    cmd: "Command"


Command = Union[ExecCmd, RedirCmd, PipeCmd, ListCmd, BackCmd]


class Tokenizer:
    """Splits a command line into words and operator symbols."""

    def __init__(self, text):
        self.text = text
        self.pos = 0

    @property
    def rest(self):
        """The unread part of the text."""
        return self.text[self.pos:]

    def at_end(self):
        return self.pos >= len(self.text)

    def _skip_whitespace(self):
        while self.pos < len(self.text) and self.text[self.pos] in WHITESPACE:
            self.pos += 1

    def peek(self, toks):
        """Skip whitespace; true if the next character is one of toks."""
        self._skip_whitespace()
        return not self.at_end() and self.text[self.pos] in toks

    def gettoken(self) -> Tuple[str, str]:
        """Consume one token and return (kind, text).

        kind is '' at the end of input, 'a' for a word, '+' for '>>',
        and the symbol itself otherwise.
        """
        self._skip_whitespace()
        start = self.pos
        if self.at_end():
            kind = ""
        else:
            c = self.text[self.pos]
            if c in "|();&<":
                kind = c
                self.pos += 1
            elif c == ">":
                kind = ">"
                self.pos += 1
                if self.pos < len(self.text) and self.text[self.pos] == ">":
                    kind = "+"
                    self.pos += 1
            else:
                kind = "a"
                while (self.pos < len(self.text)
                       and self.text[self.pos] not in WHITESPACE
                       and self.text[self.pos] not in SYMBOLS):
                    self.pos += 1
        word = self.text[start:self.pos]
        self._skip_whitespace()
        return kind, word


_REDIRECTIONS = {
    "<": (OpenFlag.RDONLY, 0),
    ">": (OpenFlag.WRONLY | OpenFlag.CREATE | OpenFlag.TRUNC, 1),
    "+": (OpenFlag.WRONLY | OpenFlag.CREATE, 1),
}


def _parse_line(tk: Tokenizer) -> Command:
    cmd = _parse_pipe(tk)
    while tk.peek("&"):
        tk.gettoken()
        cmd = BackCmd(cmd)
    if tk.peek(";"):
        tk.gettoken()
        cmd = ListCmd(cmd, _parse_line(tk))
    return cmd


def _parse_pipe(tk: Tokenizer) -> Command:
    cmd = _parse_exec(tk)
    if tk.peek("|"):
        tk.gettoken()
        cmd = PipeCmd(cmd, _parse_pipe(tk))
    return cmd


def _parse_redirs(cmd: Command, tk: Tokenizer) -> Command:
    while tk.peek("<>"):
        tok, _ = tk.gettoken()
        kind, word = tk.gettoken()
        if kind != "a":
            raise ShellSyntaxError("missing file for redirection")
        mode, fd = _REDIRECTIONS[tok]
        cmd = RedirCmd(cmd, word, mode, fd)
    return cmd


def _parse_block(tk: Tokenizer) -> Command:
    if not tk.peek("("):
        raise ShellSyntaxError("parseblock")
    tk.gettoken()
    cmd = _parse_line(tk)
    if not tk.peek(")"):
        raise ShellSyntaxError("syntax - missing )")
    tk.gettoken()
    return _parse_redirs(cmd, tk)


def _parse_exec(tk: Tokenizer) -> Command:
    if tk.peek("("):
        return _parse_block(tk)
    exe = ExecCmd()
    ret: Command = _parse_redirs(exe, tk)
    while not tk.peek("|)&;"):
        kind, word = tk.gettoken()
        if kind == "":
            break
        if kind != "a":
            raise ShellSyntaxError("syntax")
        exe.argv.append(word)
        if len(exe.argv) >= MAXARGS:
            raise ShellSyntaxError("too many args")
        ret = _parse_redirs(ret, tk)
    return ret


def parse_command(line) -> Optional[Command]:
    """Parse a whole command line into a command tree."""
    tk = Tokenizer(line)
    cmd = _parse_line(tk)
    tk.peek("")
    if not tk.at_end():
        raise ShellSyntaxError("syntax", leftover=tk.rest)
    return cmd