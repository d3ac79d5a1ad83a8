"""Expansion of $? and $NAME inside words."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minishell.environment import Environment
    from minishell.shell import Shell


def _is_name_char(ch: str) -> bool:
    return ch == "_" or (ch.isascii() and ch.isalnum())


def expand_exit_status(text: str, exit_status: int) -> str:
    """Replace $? outside single quotes with the last exit status."""
    out: list[str] = []
    quote: str | None = None
    i = 0
    size = len(text)
    while i < size:
        ch = text[i]
        if quote is None and ch in "'\"":
            quote = ch
        elif quote is not None and ch == quote:
            quote = None
        elif ch == "$" and text[i + 1:i + 2] == "?" and quote != "'":
            out.append(str(exit_status))
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def expand_env_vars(text: str, env: Environment) -> str:
    """Replace $NAME outside single quotes with the variable's value.

    Unknown variables expand to nothing and "$$" collapses to "$". The
    quotes themselves are kept; they are removed later.
    """
    result = text
    quote: str | None = None
    i = 0
    while i < len(result):
        ch = result[i]
        if quote is None and ch in "'\"":
            quote = ch
            i += 1
            continue
        if quote is not None and ch == quote:
            quote = None
            i += 1
            continue
        if quote == "'" or ch != "$":
            i += 1
            continue
        nxt = result[i + 1:i + 2]
        if not nxt or not (_is_name_char(nxt) or nxt in "?$"):
            i += 1
            continue
        if nxt == "$":
            result = result[:i] + result[i + 1:]
            continue
        if nxt == "?":
            i += 1
            continue
        end = i + 1
        while end < len(result) and _is_name_char(result[end]):
            end += 1
        value = env.get(result[i + 1:end]) or ""
        result = result[:i] + value + result[end:]
        # Scanning resumes on the last character written, as the shell always has.
        i = max(i + len(value) - 1, 0)
    return result


def expand_token(token: str, shell: Shell) -> str:
    """Expand $? and then environment variables in a token."""
    return expand_env_vars(expand_exit_status(token, shell.exit_status), shell.env)