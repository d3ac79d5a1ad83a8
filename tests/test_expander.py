import pytest

from minishell.environment import Environment
from minishell.expander import expand_env_vars, expand_exit_status, expand_token
from minishell.shell import Shell

HOME = "/home/tester"


@pytest.fixture
def env():
    return Environment([("HOME", HOME), ("A", "x"), ("B", "y"), ("USER_NAME", "tester")])


def test_exit_status_alone():
    assert expand_exit_status("$?", 42) == str(42)


def test_exit_status_inside_word():
    status = 7
    assert expand_exit_status("a$?b", status) == "a" + str(status) + "b"


def test_exit_status_in_double_quotes():
    assert expand_exit_status('"$?"', 5) == '"' + str(5) + '"'


@pytest.mark.parametrize("word", ["'$?'", "$", "a$b", "?$", "plain"])
def test_exit_status_leaves_other_text(word):
    assert expand_exit_status(word, 9) == word


def test_exit_status_repeated():
    assert expand_exit_status("$?$?", 1) == str(1) * 2


def test_variable(env):
    assert expand_env_vars("$HOME", env) == HOME


def test_variable_in_double_quotes(env):
    assert expand_env_vars('"$HOME"', env) == f'"{HOME}"'


def test_variable_with_suffix_text(env):
    assert expand_env_vars("$HOME/bin", env) == HOME + "/bin"


def test_underscore_in_name(env):
    assert expand_env_vars("$USER_NAME", env) == env.get("USER_NAME")


def test_adjacent_variables(env):
    assert expand_env_vars("$A$B", env) == env.get("A") + env.get("B")


def test_unknown_variable_is_removed(env):
    assert expand_env_vars("pre$NOPE", env) == "pre"


def test_doubled_dollar_collapses(env):
    assert expand_env_vars("$$HOME", env) == HOME


@pytest.mark.parametrize("word", ["'$HOME'", "$", "$ x", "a$-", "cost: 5$"])
def test_words_left_alone(env, word):
    assert expand_env_vars(word, env) == word


def test_expand_token_does_both(env):
    shell = Shell(env=env, exit_status=3)
    assert expand_token("$? $HOME", shell) == f"{3} {HOME}"


def test_expand_token_respects_single_quotes(env):
    shell = Shell(env=env, exit_status=3)
    assert expand_token("'$? $HOME'", shell) == "'$? $HOME'"