"""Quote removal and plain error messages."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

from minishell.shell import ERR_PREFIX


@dataclass(frozen=True)
class QuoteInfo:
    """A word with its quotes removed and which kinds of quote it held."""

    text: str
    has_single: bool = False
    has_double: bool = False


def remove_quotes(text: str) -> QuoteInfo:
    """Strip the quote characters that open and close quoted runs."""
    if text in ('""', "''"):
        return QuoteInfo("", text[0] == "'", text[0] == '"')
    out: list[str] = []
    outer: str | None = None
    has_single = False
    has_double = False
    for ch in text:
        if outer is None and ch == "'":
            outer = "'"
            has_single = True
        elif outer is None and ch == '"':
            outer = '"'
            has_double = True
        elif outer is not None and ch == outer:
            outer = None
        else:
            out.append(ch)
    return QuoteInfo("".join(out), has_single, has_double)


def error_msg(msg: str, stream: TextIO | None = None) -> None:
    """Write a message prefixed with the shell name, followed by a newline."""
    target = sys.stderr if stream is None else stream
    target.write(f"{ERR_PREFIX}{msg}\n")