"""The interactive prompt loop."""

from __future__ import annotations

import os
import signal
import socket
import sys
from collections.abc import Iterable, Mapping, Sequence

from minishell.environment import init_env
from minishell.errors import ParseError, ShellExit, handle_unclosed_quotes
from minishell.executor import execute_cmd
from minishell.parser import parse_input
from minishell.shell import HOST_NAME_MAX, NUM_COLORS, PROMPT, PROMPT_COLORS, Shell
from minishell.signals import setup_signals


def init_shell(envp: Iterable[str] | Mapping[str, str] | None = None) -> Shell:
    """Create a shell whose environment is copied from envp (the process's by default)."""
    source = os.environ if envp is None else envp
    return Shell(env=init_env(source))


def _hostname() -> str:
    try:
        name = socket.gethostname()
    except OSError:
        name = "unknown"
    name = name[: HOST_NAME_MAX - 1]
    return name.split(".", 1)[0]


def _display_cwd(shell: Shell) -> str:
    try:
        cwd = os.getcwd()
    except OSError:
        return "~"
    home = shell.env.get("HOME")
    if home is not None and cwd.startswith(home):
        cwd = "~" + cwd[len(home):]
    return cwd


def get_prompt(shell: Shell) -> str:
    """Build the two-line prompt, moving on to the next colour each time."""
    user = shell.env.get("USER") or "user"
    shell.color_index = (shell.color_index + 1) % NUM_COLORS
    color = PROMPT_COLORS[shell.color_index]
    return PROMPT.format(user=user, host=_hostname(), cwd=_display_cwd(shell), color=color)


def run_line(shell: Shell, line: str) -> int:
    """Parse and run one input line and return the shell's exit status.

    ShellExit raised by the exit builtin is passed on to the caller.
    """
    if not line:
        return shell.exit_status
    shell.add_history(line)
    try:
        commands = parse_input(line, shell)
    except ParseError:
        handle_unclosed_quotes(shell)
        return shell.exit_status
    if commands and commands[0].args:
        shell.exit_status = execute_cmd(shell, commands)
    return shell.exit_status


def _enable_line_editing() -> None:
    if not sys.stdin.isatty():
        return
    try:
        import readline  # noqa: F401  (enables editing and history for input())
    except ImportError:
        pass


def _remember(line: str) -> None:
    if not sys.stdin.isatty():
        return
    try:
        import readline
    except ImportError:
        return
    readline.add_history(line)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the shell until end of input or exit; return the final status."""
    shell = init_shell()
    previous_int = signal.getsignal(signal.SIGINT)
    previous_quit = signal.getsignal(signal.SIGQUIT)
    setup_signals()
    _enable_line_editing()
    try:
        while True:
            prompt = get_prompt(shell)
            try:
                line = input(prompt)
            except EOFError:
                shell.stdout.write("exit\n")
                shell.stdout.flush()
                break
            except KeyboardInterrupt:
                continue
            if line:
                _remember(line)
            try:
                run_line(shell, line)
            except ShellExit as exc:
                return exc.status
            except KeyboardInterrupt:
                continue
    finally:
        signal.signal(signal.SIGINT, previous_int)
        signal.signal(signal.SIGQUIT, previous_quit)
    return shell.exit_status


if __name__ == "__main__":
    raise SystemExit(main())