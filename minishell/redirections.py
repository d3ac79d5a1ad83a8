"""Opening the files and here-documents a command's redirections name."""

from __future__ import annotations

import io
import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TextIO

from minishell.parser import RedirType
from minishell.shell import ERR_NO_FILE, ERR_NO_PERM

if TYPE_CHECKING:
    from minishell.parser import Command
    from minishell.shell import Shell


class RedirectionError(Exception):
    """A redirection could not be set up."""


@dataclass
class Streams:
    """The input and output a command gets from its redirections.

    A stream left as None means the command keeps the shell's own.
    """

    stdin: TextIO | None = None
    stdout: TextIO | None = None
    _opened: list[TextIO] = field(default_factory=list, init=False, repr=False)

    def _replace_stdin(self, stream: TextIO) -> None:
        if self.stdin is not None:
            self.stdin.close()
            self._opened.remove(self.stdin)
        self.stdin = stream
        self._opened.append(stream)

    def _replace_stdout(self, stream: TextIO) -> None:
        if self.stdout is not None:
            self.stdout.close()
            self._opened.remove(self.stdout)
        self.stdout = stream
        self._opened.append(stream)

    def close(self) -> None:
        """Close every stream these redirections opened."""
        for stream in self._opened:
            stream.close()
        self._opened.clear()

    def __enter__(self) -> Streams:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def open_input_file(filename: str) -> TextIO:
    """Open a file to read a command's input from."""
    try:
        return open(filename, encoding="utf-8")
    except OSError as exc:
        raise RedirectionError(f"{filename}{ERR_NO_FILE}") from exc


def _create_0644(path: str, flags: int) -> int:
    return os.open(path, flags, 0o644)


def open_output_file(filename: str, append: bool) -> TextIO:
    """Open a file for a command's output, truncating it unless appending."""
    mode = "a" if append else "w"
    try:
        return open(filename, mode, encoding="utf-8", opener=_create_0644)
    except OSError as exc:
        raise RedirectionError(f"{filename}{ERR_NO_PERM}") from exc


def read_heredoc(delimiter: str, shell: Shell) -> str:
    """Read lines from the shell's input up to the delimiter line or end of input."""
    lines: list[str] = []
    shell.in_heredoc = True
    try:
        while True:
            shell.stdout.write("> ")
            shell.stdout.flush()
            line = shell.stdin.readline()
            if not line or (
                len(line) - 1 == len(delimiter) and line.startswith(delimiter)
            ):
                break
            lines.append(line)
    finally:
        shell.in_heredoc = False
    return "".join(lines)


def apply_redirections(command: Command, shell: Shell) -> Streams:
    """Open a command's redirections in order; later ones replace earlier ones.

    On failure the message goes to the shell's error stream and
    RedirectionError is raised.
    """
    streams = Streams()
    try:
        for redir in command.redirs:
            if redir.kind is RedirType.INPUT:
                streams._replace_stdin(open_input_file(redir.file))
            elif redir.kind is RedirType.OUTPUT:
                streams._replace_stdout(open_output_file(redir.file, False))
            elif redir.kind is RedirType.APPEND:
                streams._replace_stdout(open_output_file(redir.file, True))
            elif redir.kind is RedirType.HEREDOC:
                streams._replace_stdin(io.StringIO(read_heredoc(redir.file, shell)))
    except RedirectionError as exc:
        streams.close()
        shell.stderr.write(f"{exc}\n")
        raise
    return streams