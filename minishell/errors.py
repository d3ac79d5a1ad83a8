"""Errors raised inside the shell and the messages printed for them."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from minishell.quotes import remove_quotes
from minishell.shell import ERR_NOT_FOUND, ERR_PREFIX

if TYPE_CHECKING:
    from minishell.shell import Shell


class ParseError(Exception):
    """An input line could not be turned into commands."""


class UnclosedQuotesError(ParseError):
    """An input line has a quote that is never closed."""


class ShellExit(Exception):
    """The shell is asked to stop with the given status."""

    def __init__(self, status: int = 0) -> None:
        super().__init__(status)
        self.status = status


def _stream(stream: TextIO | None) -> TextIO:
    return sys.stderr if stream is None else stream


def print_error_prefix(stream: TextIO | None = None) -> None:
    """Write the shell's error prefix."""
    _stream(stream).write(ERR_PREFIX)


def print_error_number(number: int, stream: TextIO | None = None) -> None:
    """Write a number, with no newline."""
    _stream(stream).write(str(number))


def handle_command_not_found(cmd: str, shell: Shell) -> None:
    """Set status 127 and report a command that was not found."""
    shell.exit_status = 127
    if cmd.startswith("$?"):
        print_error_number(shell.exit_status, shell.stderr)
        return
    shell.stderr.write(f"{remove_quotes(cmd).text}{ERR_NOT_FOUND}\n")


def handle_unclosed_quotes(shell: Shell) -> None:
    """Set status 2 and report unclosed quotes."""
    shell.exit_status = 2
    print_error_prefix(shell.stderr)
    shell.stderr.write("Error: Unclosed quotes\n")