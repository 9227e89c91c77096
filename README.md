# minishell

A small interactive shell. It reads a line, splits it into tokens, builds a
syntax tree and runs it.

## What it understands

- Words. A word in single or double quotes is kept together as one token,
  quotes included.
- Pipes: `a | b`. Both sides run at the same time, the left side's output
  feeding the right side; the status is that of the right side.
- Logical operators: `a && b`, `a || b`
- Subshells: `( a && b ) | c`. Changes a group makes to variables or to the
  working directory do not reach the shell.
- Redirection tokens `<`, `>`, `>>` and `<<`. They are parsed and kept on the
  command node, but commands do not act on them.
- Builtins: `echo` (with `-n`, `-nn`, ...), `cd`, `pwd`, `export`, `unset`,
  `env`, `exit`

Other commands are looked up on `PATH` (or used as given when the name holds
a `/`) and started as child processes. A command that cannot be found gives
status 127. The exit status of the last command is kept, and `exit` with no
argument exits with that status; `exit N` exits with `N % 256`.

Syntax errors, such as an unclosed quote, a lone `&`, an unclosed
parenthesis or an operator with nothing after it, are reported on standard
error prefixed with `minishell: ` and leave the last status unchanged.

## What it does not do

- Redirections are not performed; files are neither opened nor created, and
  `<<` reads no here-document.
- There is no expansion: `$NAME`, `$?`, `~` and wildcards are passed on as
  written, and quotes are not removed from quoted words.
- There is no job control or signal handling; Ctrl-C ends the shell with
  status 130.

## Installation

```
pip install .
```

## Running

```
minishell
```

The prompt is `> `. The shell prints the tokens of each line it reads, as
`[echo]->[hi]`, then runs the line. Press Ctrl-D to leave; the shell prints
`exit` when it does.

## Using it as a library

```python
from minishell.tokens import tokenize, format_tokens
from minishell.parser import parse
from minishell.nodes import format_ast
from minishell.environment import Environment
from minishell.executor import Executor

tokens = tokenize("echo hello && (ls | wc -l)")
print(format_tokens(tokens))
tree = parse(tokens)
print(format_ast(tree))

env = Environment.from_strings(["PATH=/usr/bin:/bin", "HOME=/tmp"])
status = Executor(env).execute(tree)
```

`tokenize` raises `minishell.tokens.LexerError` and `parse` raises
`minishell.parser.ParseError` on bad input.

`minishell.shell.Shell` ties the pieces together. `Shell(envp)` takes a list
of `NAME=value` strings (the process environment when omitted),
`Shell.run_line` runs one line and returns its status, and `Shell.repl` runs
the interactive loop. Set `show_tokens` to `False` to stop the token echo.
The `exit` builtin raises `minishell.builtins.ShellExit`, whose `code` holds
the requested status.

## Tests

```
pip install .[test]
pytest
```