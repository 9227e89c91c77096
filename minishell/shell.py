"""The interactive shell: read a line, tokenize, parse, execute."""

from __future__ import annotations

import os
import sys

from .builtins import BuiltinContext, ShellExit
from .environment import Environment
from .executor import Executor
from .parser import ParseError, parse
from .tokens import LexerError, format_tokens, tokenize

_PROMPT = "> "


class Shell:
    """A shell session holding the environment and the last exit status."""

    def __init__(self, envp=None) -> None:
        if envp is None:
            envp = [f"{name}={value}" for name, value in os.environ.items()]
        self.env = Environment.from_strings(envp)
        self.executor = Executor(self.env)
        self.show_tokens = True

    @property
    def context(self) -> BuiltinContext:
        return self.executor.context

    @property
    def last_exit_status(self) -> int:
        return self.context.last_exit_status

    def run_line(self, line: str) -> int:
        """Run one command line and return the resulting exit status.

        Lexing and parsing errors are reported and leave the status as it
        was. ``exit`` raises :class:`ShellExit`.
        """
        try:
            tokens = tokenize(line)
        except LexerError as exc:
            self.context.error(str(exc))
            return self.last_exit_status
        if not tokens:
            return self.last_exit_status
        if self.show_tokens:
            self.context.write(format_tokens(tokens) + "\n")
        try:
            tree = parse(tokens)
        except ParseError as exc:
            self.context.error(str(exc))
            return self.last_exit_status
        if tree is None:
            return self.last_exit_status
        return self.executor.execute(tree)

    def repl(self) -> int:
        """Read and run lines until end of input or ``exit``; return the code."""
        try:
            import readline  # noqa: F401  (line editing and history for input())
        except ImportError:
            pass
        while True:
            try:
                line = input(_PROMPT)
            except EOFError:
                break
            try:
                self.run_line(line)
            except ShellExit as exc:
                return exc.code
        self.context.write("exit\n")
        return 0


def main(argv=None) -> int:
    """Start an interactive session with the process environment."""
    shell = Shell()
    try:
        return shell.repl()
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())