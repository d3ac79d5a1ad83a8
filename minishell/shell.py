"""Shell state shared by the parser, the builtins and the executor."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from minishell.environment import Environment

MAX_PATH_LEN = 4096
HOST_NAME_MAX = 64
NUM_COLORS = 6

ERR_PREFIX = "minishell: "
ERR_NOT_FOUND = ": command not found"
ERR_NO_FILE = ": No such file or directory"
ERR_NO_PERM = ": Permission denied"
ERR_NOT_DIR = ": Not a directory"
ERR_IS_DIR = ": Is a directory"
ERR_TOO_MANY_ARGS = ": too many arguments"
ERR_NUM_ARG = ": numeric argument required"
ERR_SYNTAX = ": syntax error near unexpected token `{}'"
ERR_HOME = ": HOME not set"
ERR_PREVIOUS_DIR_UNSET = ": OLDPWD not set"
ERR_PIPE = ": pipe error"
ERR_FORK = ": fork failed"
ERR_DUP = ": dup2 failed"
ERR_MEMORY = ": memory allocation failed"
ERR_CD_ARGS = "cd: too many arguments"
ERR_EXIT_ARGS = "exit: too many arguments"
ERR_EXPORT_ARGS = "export: not a valid identifier"
ERR_UNSET_ARGS = "unset: not a valid identifier"

COLOR_RED = "\001\033[1;31m\002"
COLOR_GREEN = "\001\033[1;32m\002"
COLOR_YELLOW = "\001\033[1;33m\002"
COLOR_BLUE = "\001\033[1;34m\002"
COLOR_MAGENTA = "\001\033[1;35m\002"
COLOR_CYAN = "\001\033[1;36m\002"
COLOR_RESET = "\001\033[0m\002"
COLOR_GRAY = "\001\033[1;90m\002"
COLOR_LIGHT_CYAN = "\001\033[1;96m\002"

PROMPT_COLORS = (
    COLOR_RED,
    COLOR_MAGENTA,
    COLOR_YELLOW,
    COLOR_GREEN,
    COLOR_BLUE,
    COLOR_CYAN,
)

PROMPT = (
    COLOR_GRAY + "╭─" + COLOR_LIGHT_CYAN + "{user}@{host}:{cwd}" + COLOR_RESET
    + "\n" + COLOR_GRAY + "╰─" + COLOR_RESET + "{color}minishell" + COLOR_RESET + "$ "
)


@dataclass
class Shell:
    """The running shell: environment, last status and I/O streams."""

    env: Environment = field(default_factory=Environment)
    exit_status: int = 0
    in_heredoc: bool = False
    color_index: int = 0
    history: list[str] = field(default_factory=list)
    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)

    def add_history(self, line: str) -> None:
        """Record a line entered at the prompt."""
        self.history.append(line)