import io

from minishell.errors import (
    ShellExit,
    handle_command_not_found,
    handle_unclosed_quotes,
    print_error_number,
    print_error_prefix,
)
from minishell.shell import Shell


def make_shell():
    return Shell(stdout=io.StringIO(), stderr=io.StringIO())


def test_print_error_prefix():
    buf = io.StringIO()
    print_error_prefix(buf)
    assert buf.getvalue() == "minishell: "


def test_print_error_number_has_no_newline():
    buf = io.StringIO()
    print_error_number(42, buf)
    assert buf.getvalue() == "42"


def test_command_not_found_message_and_status():
    shell = make_shell()
    handle_command_not_found("ls", shell)
    assert shell.exit_status == 127
    assert shell.stderr.getvalue() == "ls: command not found\n"


def test_command_not_found_removes_quotes():
    shell = make_shell()
    handle_command_not_found('"foo"', shell)
    assert shell.stderr.getvalue() == "foo: command not found\n"


def test_command_not_found_exit_status_word():
    shell = make_shell()
    handle_command_not_found("$?", shell)
    assert shell.stderr.getvalue() == "127"
    assert shell.exit_status == 127


def test_unclosed_quotes():
    shell = make_shell()
    handle_unclosed_quotes(shell)
    assert shell.exit_status == 2
    assert shell.stderr.getvalue() == "minishell: Error: Unclosed quotes\n"


def test_shell_exit_carries_status():
    error = ShellExit(3)
    assert error.status == 3