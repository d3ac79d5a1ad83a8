from minishell.environment import Environment
from minishell.shell import PROMPT, Shell


def test_defaults():
    shell = Shell()
    assert shell.exit_status == 0
    assert shell.in_heredoc is False
    assert shell.color_index == 0
    assert shell.history == []
    assert len(shell.env) == 0


def test_add_history_keeps_order():
    shell = Shell()
    shell.add_history("ls")
    shell.add_history("pwd")
    assert shell.history == ["ls", "pwd"]


def test_history_not_shared_between_shells():
    first = Shell()
    second = Shell()
    first.add_history("echo")
    assert second.history == []


def test_env_is_kept():
    env = Environment([("HOME", "/tmp")])
    shell = Shell(env=env)
    assert shell.env.get("HOME") == "/tmp"


def test_prompt_template_fills_fields():
    text = PROMPT.format(user="u", host="h", cwd="~/w", color="")
    assert "u@h:~/w" in text
    assert text.endswith("$ ")