"""Commands the shell runs itself instead of starting a program."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TextIO

from .environment import Environment, is_valid_name
from .textutil import atoi

_PREFIX = "minishell: "


class ShellExit(Exception):
    """Raised by ``exit`` to ask the shell to stop with ``code``."""

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code


@dataclass
class BuiltinContext:
    """What a builtin can see and change: the environment, the last exit
    status and the output streams (None means the process's own)."""

    env: Environment = field(default_factory=Environment)
    last_exit_status: int = 0
    stdout: TextIO | None = None
    stderr: TextIO | None = None

    def write(self, text: str) -> None:
        (self.stdout or sys.stdout).write(text)

    def error(self, message: str) -> None:
        (self.stderr or sys.stderr).write(_PREFIX + message + "\n")


def builtin_echo(ctx: BuiltinContext, args: Sequence[str]) -> int:
    """Print the arguments; any leading ``-n``, ``-nn``... suppress the newline."""
    words = list(args[1:])
    newline = True
    while words and _is_n_option(words[0]):
        newline = False
        words.pop(0)
    ctx.write(" ".join(words) + ("\n" if newline else ""))
    return 0


def _is_n_option(arg: str) -> bool:
    return arg.startswith("-n") and all(c == "n" for c in arg[2:])


def builtin_cd(ctx: BuiltinContext, args: Sequence[str]) -> int:
    """Change directory to the argument, or to ``$HOME`` without one."""
    if len(args) > 2:
        ctx.error("cd: too many arguments")
        return 1
    if len(args) == 2:
        path = args[1]
    else:
        path = ctx.env.get("HOME")
        if path is None:
            ctx.error("cd: HOME not set")
            return 1
    try:
        os.chdir(path)
    except OSError as exc:
        ctx.error(f"cd: {exc.strerror}")
        return 1
    return 0


def builtin_pwd(ctx: BuiltinContext, args: Sequence[str]) -> int:
    """Print the current working directory."""
    try:
        cwd = os.getcwd()
    except OSError as exc:
        ctx.error(f"pwd: {exc.strerror}")
        return 1
    ctx.write(cwd + "\n")
    return 0


def builtin_env(ctx: BuiltinContext, args: Sequence[str]) -> int:
    """Print every variable that has a value; arguments are refused."""
    if len(args) > 1:
        ctx.error(f"env: '{args[1]}': No such file or directory")
        return 127
    for name, value in ctx.env:
        if value is not None:
            ctx.write(f"{name}={value}\n")
    return 0


def _print_declarations(ctx: BuiltinContext) -> None:
    for entry in sorted(ctx.env.to_list(export_mode=True)):
        name, sep, value = entry.partition("=")
        if sep:
            ctx.write(f'declare -x {name}="{value}"\n')
        else:
            ctx.write(f"declare -x {entry}\n")


def builtin_export(ctx: BuiltinContext, args: Sequence[str]) -> int:
    """Set ``NAME=value`` pairs, or list all variables sorted without arguments."""
    if len(args) < 2:
        _print_declarations(ctx)
        return 0
    status = 0
    for arg in args[1:]:
        name, sep, value = arg.partition("=")
        if is_valid_name(name):
            ctx.env.set(name, value if sep else None)
        else:
            ctx.error(f"export: `{arg}': not a valid identifier")
            status = 1
    return status


def builtin_unset(ctx: BuiltinContext, args: Sequence[str]) -> int:
    """Remove the named variables."""
    status = 0
    for arg in args[1:]:
        if is_valid_name(arg):
            ctx.env.unset(arg)
        else:
            ctx.error(f"unset: `{arg}': not a valid identifier")
            status = 1
    return status


def _is_exit_code(text: str) -> bool:
    body = text[1:] if text[:1] in ("+", "-") else text
    return all("0" <= c <= "9" for c in body)


def builtin_exit(ctx: BuiltinContext, args: Sequence[str]) -> int:
    """Leave the shell by raising :class:`ShellExit`.

    Returns 1 without exiting when given more than one numeric argument.
    """
    if len(args) < 2:
        raise ShellExit(ctx.last_exit_status)
    if not _is_exit_code(args[1]):
        ctx.error(f"exit: {args[1]}: numeric argument required")
        raise ShellExit(255)
    if len(args) > 2:
        ctx.error("exit: too many arguments")
        return 1
    raise ShellExit(atoi(args[1]) % 256)


_BUILTINS: dict[str, Callable[[BuiltinContext, Sequence[str]], int]] = {
    "echo": builtin_echo,
    "cd": builtin_cd,
    "pwd": builtin_pwd,
    "export": builtin_export,
    "unset": builtin_unset,
    "env": builtin_env,
    "exit": builtin_exit,
}


def is_builtin(name: str | None) -> bool:
    """Return True if ``name`` is run by the shell itself."""
    return name in _BUILTINS


def run_builtin(ctx: BuiltinContext, args: Sequence[str]) -> int:
    """Run the builtin named by ``args[0]``; unknown names give status 1."""
    if not args or args[0] not in _BUILTINS:
        return 1
    return _BUILTINS[args[0]](ctx, args)