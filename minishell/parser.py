"""Turning an input line into a pipeline of commands."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING

from minishell.errors import ParseError
from minishell.expander import expand_token
from minishell.lexer import tokenize
from minishell.shell import ERR_SYNTAX

if TYPE_CHECKING:
    from minishell.shell import Shell


class RedirType(IntEnum):
    """The kinds of redirection."""

    INPUT = 1
    OUTPUT = 2
    APPEND = 3
    HEREDOC = 4


_REDIR_TOKENS = {
    "<": RedirType.INPUT,
    ">": RedirType.OUTPUT,
    ">>": RedirType.APPEND,
    "<<": RedirType.HEREDOC,
}

_VALID_VAR = re.compile(r"\$[A-Za-z_?]")


@dataclass
class Redirection:
    """A redirection of a command's input or output."""

    kind: RedirType
    file: str


@dataclass
class Command:
    """One command of a pipeline: its words and its redirections."""

    args: list[str] = field(default_factory=list)
    redirs: list[Redirection] = field(default_factory=list)


def _syntax_error(token: str) -> ParseError:
    return ParseError(ERR_SYNTAX.format(token).lstrip(": "))


def _expand_word(token: str, shell: Shell) -> str:
    if token.startswith("'") or not _VALID_VAR.search(token):
        return token
    return expand_token(token, shell)


def parse_input(text: str, shell: Shell) -> list[Command]:
    """Parse a line into the commands of a pipeline, in order."""
    tokens = tokenize(text)
    if not tokens:
        raise ParseError("empty input")
    commands: list[Command] = []
    current: Command | None = None
    for index, token in enumerate(tokens):
        if current is None:
            current = Command()
            commands.append(current)
        if token == "|":
            if not current.args:
                raise _syntax_error("|")
            current = None
            continue
        if token[0] in "<>":
            if index + 1 >= len(tokens):
                raise _syntax_error("newline")
            current.redirs.append(Redirection(_REDIR_TOKENS[token], tokens[index + 1]))
            continue
        current.args.append(_expand_word(token, shell))
    return commands