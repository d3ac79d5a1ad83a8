"""Commands the shell runs itself instead of starting a program."""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import TYPE_CHECKING

from minishell.errors import ShellExit
from minishell.quotes import remove_quotes
from minishell.shell import (
    ERR_EXIT_ARGS,
    ERR_EXPORT_ARGS,
    ERR_HOME,
    ERR_NUM_ARG,
    ERR_PREFIX,
)

if TYPE_CHECKING:
    from minishell.shell import Shell


def _is_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def is_valid_identifier(name: str) -> bool:
    """Tell whether a name is a letter or '_' followed by letters, digits or '_'."""
    if not name or not (_is_alpha(name[0]) or name[0] == "_"):
        return False
    return all(_is_alnum(ch) or ch == "_" for ch in name[1:])


def _is_n_flag(arg: str) -> bool:
    return len(arg) > 1 and arg[0] == "-" and all(ch == "n" for ch in arg[1:])


def cmd_echo(shell: Shell, args: Sequence[str]) -> int:
    """Print the arguments separated by spaces; leading -n flags drop the newline."""
    words = list(args[1:])
    newline = True
    while words and _is_n_flag(words[0]):
        newline = False
        words.pop(0)
    shell.stdout.write(" ".join(remove_quotes(word).text for word in words))
    if newline:
        shell.stdout.write("\n")
    return 0


def cmd_cd(shell: Shell, args: Sequence[str]) -> int:
    """Change directory to the argument, to HOME, or to OLDPWD for '-'."""
    if len(args) < 2:
        path = shell.env.get("HOME")
        if path is None:
            shell.stderr.write(f"{ERR_PREFIX}cd{ERR_HOME}\n")
            return 1
    elif args[1] == "-":
        path = shell.env.get("OLDPWD")
        if path is None:
            shell.stderr.write("cd: OLDPWD not set\n")
            return 1
        shell.stdout.write(f"{path}\n")
    else:
        path = args[1]
    try:
        os.chdir(path)
    except OSError:
        shell.stderr.write(f"cd: {path}: No such file or directory\n")
        return 1
    old_pwd = shell.env.get("PWD")
    if old_pwd is not None:
        shell.env.set("OLDPWD", old_pwd)
    try:
        shell.env.set("PWD", os.getcwd())
    except OSError:
        pass
    return 0


def cmd_pwd(shell: Shell, args: Sequence[str]) -> int:
    """Print the current working directory."""
    try:
        cwd = os.getcwd()
    except OSError:
        shell.stderr.write(f"{ERR_PREFIX}pwd: error retrieving current directory\n")
        return 1
    shell.stdout.write(f"{cwd}\n")
    return 0


def _print_export(shell: Shell) -> None:
    for key, value in shell.env.items():
        if value is None:
            shell.stdout.write(f"declare -x {key}\n")
        else:
            shell.stdout.write(f'declare -x {key}="{value}"\n')


def cmd_export(shell: Shell, args: Sequence[str]) -> int:
    """Set NAME=VALUE variables, or list all variables when given none."""
    if len(args) < 2:
        _print_export(shell)
        return 0
    for arg in args[1:]:
        name, sep, value = arg.partition("=")
        if not is_valid_identifier(name):
            shell.stderr.write(f"{ERR_EXPORT_ARGS}\n")
            return 1
        if sep:
            shell.env.set(name, value)
    return 0


def cmd_unset(shell: Shell, args: Sequence[str]) -> int:
    """Remove the named variables, reporting names that are not valid."""
    for arg in args[1:]:
        if is_valid_identifier(arg):
            shell.env.remove(arg)
        else:
            shell.stderr.write(f"unset: `{arg}': not a valid identifier\n")
    return 0


def cmd_env(shell: Shell, args: Sequence[str]) -> int:
    """Print every variable that has a value as KEY=VALUE."""
    for key, value in shell.env.items():
        if value is not None:
            shell.stdout.write(f"{key}={value}\n")
    return 0


def _is_numeric(text: str) -> bool:
    body = text[1:] if text[:1] in ("-", "+") else text
    return all("0" <= ch <= "9" for ch in body)


def _atoi(text: str) -> int:
    text = text.lstrip(" \t\n\v\f\r")
    sign = -1 if text.startswith("-") else 1
    if text[:1] in ("-", "+"):
        text = text[1:]
    digits = []
    for ch in text:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    return sign * int("".join(digits) or "0")


def cmd_exit(shell: Shell, args: Sequence[str]) -> int:
    """Stop the shell with the given status; too many arguments returns 1."""
    shell.stderr.write("exit\n")
    if len(args) < 2:
        raise ShellExit(shell.exit_status)
    if not _is_numeric(args[1]):
        shell.stderr.write(f"{ERR_PREFIX}exit{ERR_NUM_ARG}\n")
        raise ShellExit(255)
    code = _atoi(args[1])
    if len(args) > 2:
        shell.stderr.write(f"{ERR_EXIT_ARGS}\n")
        return 1
    raise ShellExit(code % 256)


def cmd_history(shell: Shell, args: Sequence[str]) -> int:
    """Print the lines entered so far, numbered from 1."""
    for number, line in enumerate(shell.history, start=1):
        shell.stdout.write(f"{number}  {line}\n")
    return 0