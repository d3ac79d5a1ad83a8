import pytest

from minishell.environment import Environment
from minishell.errors import ParseError, UnclosedQuotesError
from minishell.parser import Command, RedirType, Redirection, parse_input
from minishell.shell import Shell

HOME = "/home/tester"


@pytest.fixture
def shell():
    return Shell(env=Environment([("HOME", HOME)]), exit_status=3)


def test_single_command(shell):
    commands = parse_input("ls -l", shell)
    assert commands == [Command(args=["ls", "-l"])]


def test_pipeline(shell):
    commands = parse_input("ls -l | wc", shell)
    assert [c.args for c in commands] == [["ls", "-l"], ["wc"]]
    assert all(not c.redirs for c in commands)


def test_trailing_pipe_adds_no_command(shell):
    commands = parse_input("ls |", shell)
    assert [c.args for c in commands] == [["ls"]]


def test_input_redirection_also_keeps_file_as_word(shell):
    commands = parse_input("cat < in", shell)
    assert commands[0].redirs == [Redirection(RedirType.INPUT, "in")]
    assert commands[0].args == ["cat", "in"]


def test_output_redirection(shell):
    commands = parse_input("echo hi > out", shell)
    assert commands[0].redirs == [Redirection(RedirType.OUTPUT, "out")]


def test_redirections_keep_order(shell):
    redirs = parse_input("cmd < a > b", shell)[0].redirs
    assert [r.kind for r in redirs] == [RedirType.INPUT, RedirType.OUTPUT]
    assert [r.file for r in redirs] == ["a", "b"]


def test_variables_expanded(shell):
    assert parse_input("echo $HOME", shell)[0].args == ["echo", HOME]


def test_exit_status_expanded(shell):
    assert parse_input("echo $?", shell)[0].args == ["echo", str(shell.exit_status)]


@pytest.mark.parametrize("word", ["'$HOME'", "$1", "$", '"text"'])
def test_words_not_expanded(shell, word):
    assert parse_input(f"echo {word}", shell)[0].args == ["echo", word]


def test_redirection_without_target_is_error(shell):
    with pytest.raises(ParseError):
        parse_input("ls >", shell)


def test_blank_line_is_error(shell):
    with pytest.raises(ParseError):
        parse_input("   ", shell)


def test_unclosed_quotes(shell):
    with pytest.raises(UnclosedQuotesError):
        parse_input('echo "hi', shell)


def test_unclosed_quotes_is_parse_error(shell):
    with pytest.raises(ParseError):
        parse_input("echo 'hi", shell)