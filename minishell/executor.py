"""Running parsed commands: builtins inside the shell, programs as child processes."""

from __future__ import annotations

import dataclasses
import io
import os
import stat
import subprocess
import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TextIO

from minishell.builtins import (
    cmd_cd,
    cmd_echo,
    cmd_env,
    cmd_exit,
    cmd_export,
    cmd_history,
    cmd_pwd,
    cmd_unset,
)
from minishell.environment import Environment
from minishell.errors import ShellExit, handle_command_not_found
from minishell.quotes import remove_quotes
from minishell.redirections import RedirectionError, Streams, apply_redirections
from minishell.shell import ERR_PREFIX

if TYPE_CHECKING:
    from minishell.parser import Command
    from minishell.shell import Shell

_BUILTINS: dict[str, Callable[[Shell, Sequence[str]], int]] = {
    "echo": cmd_echo,
    "cd": cmd_cd,
    "pwd": cmd_pwd,
    "export": cmd_export,
    "unset": cmd_unset,
    "env": cmd_env,
    "exit": cmd_exit,
    "history": cmd_history,
}


def is_builtin(name: str | None) -> bool:
    """Tell whether a command name is one the shell runs itself."""
    return name in _BUILTINS


def execute_builtin(command: Command, shell: Shell) -> int:
    """Run a builtin command; return -1 if the command is not a builtin."""
    if not command.args:
        return -1
    func = _BUILTINS.get(command.args[0])
    if func is None:
        return -1
    return func(shell, command.args)


def _is_executable(path: str) -> bool:
    try:
        mode = os.stat(path).st_mode
    except OSError:
        return False
    return bool(mode & stat.S_IXUSR)


def find_command_path(cmd: str | None, env: Environment) -> str | None:
    """Find the program a command name refers to, searching PATH for bare names."""
    if not cmd:
        return None
    name = remove_quotes(cmd).text
    if name.startswith(("/", ".")):
        return name if _is_executable(name) else None
    path = env.get("PATH")
    if path is None:
        return None
    for directory in path.split(":"):
        if not directory:
            continue
        full = f"{directory}/{name}"
        if _is_executable(full):
            return full
    return None


def _fileno(stream: Any) -> int | None:
    if stream is None:
        return None
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError, io.UnsupportedOperation):
        return None


def _is_pipe(source: Any) -> bool:
    return isinstance(source, (io.BufferedIOBase, io.RawIOBase))


def _release(source: Any) -> None:
    if _is_pipe(source):
        source.close()


def _stdin_arg(source: Any) -> tuple[Any, bytes | None]:
    """What to give a child as stdin, and any bytes to write into it."""
    if isinstance(source, str):
        return subprocess.PIPE, source.encode("utf-8")
    if _is_pipe(source):
        return source, None
    fd = _fileno(source)
    if fd is not None:
        return fd, None
    try:
        return subprocess.PIPE, source.read().encode("utf-8")
    except (AttributeError, OSError):
        return subprocess.DEVNULL, None


def _output_arg(target: TextIO) -> tuple[Any, TextIO | None]:
    """What to give a child as an output, and the stream to copy it to if piped."""
    fd = _fileno(target)
    if fd is not None:
        target.flush()
        return fd, None
    return subprocess.PIPE, target


def _feed(pipe: Any, data: bytes) -> None:
    try:
        pipe.write(data)
    except BrokenPipeError:
        pass
    finally:
        try:
            pipe.close()
        except BrokenPipeError:
            pass


def _drain(pipe: Any, target: TextIO) -> None:
    data = pipe.read()
    pipe.close()
    target.write(data.decode("utf-8", errors="replace"))


def _start_thread(func: Callable[..., None], *args: Any) -> threading.Thread:
    thread = threading.Thread(target=func, args=args, daemon=True)
    thread.start()
    return thread


@dataclass
class _Child:
    process: subprocess.Popen
    threads: list[threading.Thread]

    def wait(self) -> int:
        code = self.process.wait()
        for thread in self.threads:
            thread.join()
        return code


def _spawn(
    path: str,
    argv: list[str],
    shell: Shell,
    stdin_src: Any,
    stdout_dst: TextIO | None,
) -> _Child:
    """Start a program; a stdout_dst of None leaves its output on a pipe."""
    stdin_arg, feed = _stdin_arg(stdin_src)
    if stdout_dst is None:
        stdout_arg, out_target = subprocess.PIPE, None
    else:
        stdout_arg, out_target = _output_arg(stdout_dst)
    stderr_arg, err_target = _output_arg(shell.stderr)
    process = subprocess.Popen(
        argv,
        executable=path,
        stdin=stdin_arg,
        stdout=stdout_arg,
        stderr=stderr_arg,
        env=shell.env.to_dict(),
    )
    threads = []
    if feed is not None:
        threads.append(_start_thread(_feed, process.stdin, feed))
    if out_target is not None:
        threads.append(_start_thread(_drain, process.stdout, out_target))
    if err_target is not None:
        threads.append(_start_thread(_drain, process.stderr, err_target))
    return _Child(process, threads)


def _report_exec_error(shell: Shell, exc: OSError) -> None:
    shell.stderr.write(f"{ERR_PREFIX}{exc.strerror or exc}\n")


def execute_external(command: Command, shell: Shell) -> int:
    """Run a program and return its exit status; 127 when it is not found."""
    if not command.args:
        return 1
    path = find_command_path(command.args[0], shell.env)
    if path is None:
        shell.exit_status = 127
        return 127
    argv = [remove_quotes(arg).text for arg in command.args]
    try:
        streams = apply_redirections(command, shell) if command.redirs else Streams()
    except RedirectionError:
        return 1
    with streams:
        stdin_src = streams.stdin if streams.stdin is not None else shell.stdin
        stdout_dst = streams.stdout if streams.stdout is not None else shell.stdout
        try:
            child = _spawn(path, argv, shell, stdin_src, stdout_dst)
        except OSError as exc:
            _report_exec_error(shell, exc)
            return 126
        code = child.wait()
    return code if code >= 0 else 1


def _child_shell(shell: Shell) -> Shell:
    """A copy of the shell whose changes do not reach the original."""
    return dataclasses.replace(
        shell, env=Environment(shell.env.items()), history=list(shell.history)
    )


def _run_builtin_stage(
    command: Command, shell: Shell, stdin_src: Any, stdout_dst: TextIO | None
) -> tuple[int, str | None]:
    child = _child_shell(shell)
    if isinstance(stdin_src, str):
        child.stdin = io.StringIO(stdin_src)
    elif stdin_src is not None and not _is_pipe(stdin_src):
        child.stdin = stdin_src
    else:
        child.stdin = io.StringIO("")
    buffer = io.StringIO() if stdout_dst is None else None
    child.stdout = buffer if buffer is not None else stdout_dst
    try:
        code = execute_builtin(command, child)
    except ShellExit as exc:
        code = exc.status
    return code, (buffer.getvalue() if buffer is not None else None)


def _run_stage(
    command: Command, shell: Shell, upstream: Any, first: bool, last: bool
) -> tuple[_Child | int, Any]:
    """Start one stage of a pipeline; return its result and what the next stage reads."""
    try:
        streams = apply_redirections(command, shell) if command.redirs else Streams()
    except RedirectionError:
        _release(upstream)
        return 1, ""
    with streams:
        if first:
            stdin_src = streams.stdin if streams.stdin is not None else shell.stdin
        else:
            stdin_src = upstream
        if last:
            stdout_dst = streams.stdout if streams.stdout is not None else shell.stdout
        else:
            stdout_dst = None
        if not command.args:
            _release(upstream)
            return 1, ""
        name = command.args[0]
        if is_builtin(name):
            _release(upstream)
            code, output = _run_builtin_stage(command, shell, stdin_src, stdout_dst)
            return code, output if output is not None else ""
        path = find_command_path(remove_quotes(name).text, shell.env)
        if path is None:
            _release(upstream)
            handle_command_not_found(name, _child_shell(shell))
            return 127, ""
        try:
            child = _spawn(path, list(command.args), shell, stdin_src, stdout_dst)
        except OSError as exc:
            _report_exec_error(shell, exc)
            return 126, ""
        finally:
            _release(upstream)
        return child, (child.process.stdout if not last else None)


def execute_piped_commands(commands: Sequence[Command], shell: Shell) -> int:
    """Run commands joined by pipes and return the status of the last one."""
    results: list[_Child | int] = []
    upstream: Any = None
    last_index = len(commands) - 1
    for index, command in enumerate(commands):
        result, upstream = _run_stage(
            command, shell, upstream, index == 0, index == last_index
        )
        results.append(result)
    last_status = 0
    for result in results:
        code = result.wait() if isinstance(result, _Child) else result
        if code >= 0:
            last_status = code
    return last_status


def _run_builtin_here(command: Command, shell: Shell) -> int:
    try:
        streams = apply_redirections(command, shell) if command.redirs else Streams()
    except RedirectionError:
        return 1
    saved_stdin, saved_stdout = shell.stdin, shell.stdout
    with streams:
        if streams.stdin is not None:
            shell.stdin = streams.stdin
        if streams.stdout is not None:
            shell.stdout = streams.stdout
        try:
            return execute_builtin(command, shell)
        finally:
            shell.stdin, shell.stdout = saved_stdin, saved_stdout


def execute_cmd(shell: Shell, commands: Sequence[Command]) -> int:
    """Run a parsed line: a lone builtin in the shell, otherwise child processes."""
    if not commands or not commands[0].args:
        return 1
    first = commands[0]
    if len(commands) == 1 and is_builtin(first.args[0]):
        return _run_builtin_here(first, shell)
    if len(commands) > 1:
        return execute_piped_commands(commands, shell)
    ret = execute_external(first, shell)
    if ret == 127:
        handle_command_not_found(first.args[0], shell)
    return ret