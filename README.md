# minishell

A small interactive command shell. It reads a line, splits it into words,
pipes and redirections, expands variables, and runs builtins itself or
starts programs found on `PATH`.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Run

    minishell

The prompt takes two lines. The first shows the user (`$USER`, or `user`),
the host name up to its first dot and the current directory, with the home
directory shown as `~`. The second ends in `minishell$ `, and its colour
changes with each line.

- Ctrl-C drops the line being typed and shows a fresh prompt.
- Ctrl-D at the prompt prints `exit` and leaves the shell with the status of
  the last command.
- Ctrl-\ is ignored.

Lines are kept in the shell's history. When the shell reads from a terminal
they can also be recalled with the arrow keys.

## What it understands

- **Words** with `'single'` and `"double"` quotes. The quotes are removed
  before a builtin such as `echo` uses its words, and before a lone program
  gets its arguments.
- **Variables.** `$NAME` is replaced by the variable's value, and an
  undefined variable expands to nothing. `$?` is replaced by the last exit
  status. Nothing is expanded inside single quotes, and a word that begins
  with a single quote is left exactly as written.
- **Pipelines**, such as `cmd1 | cmd2 | cmd3`. The status of the pipeline is
  the status of its last command.
- **Redirections**: `< file`, `> file`, `>> file` and here-documents
  `<< END`. A here-document prompts with `> ` and reads lines until one that
  is exactly the delimiter, or until end of input. Files are created with
  mode 0644. When a command has several redirections of the same kind, the
  last one wins.

A line that cannot be parsed is reported as
`minishell: Error: Unclosed quotes` and sets the status to 2. This covers an
unclosed quote, a pipe with no command before it, a redirection with no file
after it, and a line of nothing but blanks.

## Builtins

| command   | effect                                                                                 |
|-----------|----------------------------------------------------------------------------------------|
| `echo`    | prints its arguments separated by spaces; leading `-n`, `-nnn`, … flags drop the newline |
| `cd`      | changes directory; no argument goes to `$HOME`, `-` goes to `$OLDPWD`; updates `PWD` and `OLDPWD` |
| `pwd`     | prints the working directory                                                           |
| `export`  | sets `NAME=value`; with no arguments lists the variables as `declare -x` lines; an invalid name gives status 1 |
| `unset`   | removes variables and reports names that are not valid identifiers                    |
| `env`     | prints every variable that has a value as `KEY=VALUE`                                  |
| `exit`    | leaves the shell with the given numeric status (modulo 256), or with the last status; a non-numeric argument exits with 255; with too many arguments it stays and returns 1 |
| `history` | lists the lines entered so far, numbered from 1                                        |

A builtin on its own runs inside the shell, so `cd`, `export`, `unset` and
`exit` take effect. A builtin inside a pipeline runs on a copy of the shell,
so its changes do not last.

A command that cannot be found prints `<name>: command not found` and sets
the status to 127.

## Using it from Python

```python
from minishell.cli import init_shell, run_line

shell = init_shell(["HOME=/tmp", "PATH=/usr/bin:/bin"])
run_line(shell, "export GREETING=hello")
run_line(shell, "echo $GREETING world")
print(shell.exit_status)
```

`init_shell` takes a list of `KEY=VALUE` strings or a mapping. With no
argument it copies the process environment. `run_line` raises
`minishell.errors.ShellExit`, which carries a `status`, when the `exit`
builtin asks the shell to stop.

A `minishell.shell.Shell` writes to its `stdin`, `stdout` and `stderr`
attributes. Set them to `io.StringIO` objects to capture what builtins and
programs print.

The parts can also be used one at a time:

- `minishell.lexer.tokenize`
- `minishell.expander.expand_token`
- `minishell.parser.parse_input`, which returns a list of `Command` objects
  with `args` and `redirs`
- `minishell.executor.execute_cmd(shell, commands)`

## What it does not do

- There are no command lists or conditionals (`;`, `&&`, `||`).
- There are no background jobs, no subshells and no filename globbing.
- There is no backslash escaping.
- It does not run script files; command-line arguments are ignored.
- History is kept only for the session and is not saved to a file.