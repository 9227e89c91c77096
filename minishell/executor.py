"""Evaluation of syntax trees: builtins, programs, pipes, groups."""

from __future__ import annotations

import os
import subprocess
import sys
import threading
from typing import TextIO

from .builtins import BuiltinContext, ShellExit, is_builtin, run_builtin
from .environment import Environment
from .nodes import Node, NodeType
from .textutil import split

_NOT_FOUND_STATUS = 127


def find_command_path(cmd: str, env: Environment) -> str | None:
    """Locate the program for ``cmd``.

    A name containing ``/`` is used as given if it is executable; any other
    name is looked up in the directories of ``$PATH``.
    """
    if "/" in cmd:
        return cmd if os.access(cmd, os.X_OK) else None
    path_value = env.get("PATH")
    if path_value is None:
        return None
    for directory in split(path_value, ":"):
        candidate = f"{directory}/{cmd}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def _fileno(stream) -> int | None:
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None


def _copy_env(env: Environment) -> Environment:
    copy = Environment()
    for name, value in env:
        copy.set(name, value)
    return copy


def _current_dir() -> str | None:
    try:
        return os.getcwd()
    except OSError:
        return None


def _restore_dir(path: str | None) -> None:
    if path is None:
        return
    try:
        os.chdir(path)
    except OSError:
        pass


class Executor:
    """Run syntax trees against an environment.

    ``stdin`` and the context's ``stdout``/``stderr`` may be set to other
    streams; None means the process's own.
    """

    def __init__(self, env: Environment) -> None:
        self.env = env
        self.context = BuiltinContext(env=env)
        self.stdin: TextIO | None = None

    @property
    def last_exit_status(self) -> int:
        return self.context.last_exit_status

    def execute(self, node: Node | None) -> int:
        """Run ``node`` and record its exit status."""
        if node is None:
            return 0
        handlers = {
            NodeType.COMMAND: self.execute_command,
            NodeType.PIPE: self.execute_pipeline,
            NodeType.AND: self.execute_and,
            NodeType.OR: self.execute_or,
            NodeType.SUBSHELL: self.execute_subshell,
        }
        handler = handlers.get(node.type)
        if handler is None:
            self.context.error("internal error: unknown node type")
            status = 1
        else:
            status = handler(node)
        self.context.last_exit_status = status
        return status

    def execute_command(self, node: Node) -> int:
        """Run a builtin in-process, or start the named program."""
        if not node.args:
            return 0
        if is_builtin(node.args[0]):
            return run_builtin(self.context, node.args)
        path = find_command_path(node.args[0], self.env)
        if path is None:
            return _NOT_FOUND_STATUS
        return self._run_program(path, node.args)

    def _run_program(self, path: str, args: list[str]) -> int:
        out = self.context.stdout or sys.stdout
        err = self.context.stderr or sys.stderr
        options: dict = {
            "executable": path,
            "env": {name: value for name, value in self.env if value is not None},
        }
        if self.stdin is not None:
            in_fd = _fileno(self.stdin)
            if in_fd is None:
                options["input"] = self.stdin.read().encode()
            else:
                options["stdin"] = in_fd
        out_fd = _fileno(out)
        err_fd = _fileno(err)
        for stream, fd in ((out, out_fd), (err, err_fd)):
            if fd is not None:
                stream.flush()
        options["stdout"] = subprocess.PIPE if out_fd is None else out_fd
        options["stderr"] = subprocess.PIPE if err_fd is None else err_fd
        try:
            completed = subprocess.run(list(args), check=False, **options)
        except OSError as exc:
            self.context.error(f"execve: {exc.strerror}")
            return 1
        if out_fd is None and completed.stdout:
            out.write(completed.stdout.decode(errors="replace"))
        if err_fd is None and completed.stderr:
            err.write(completed.stderr.decode(errors="replace"))
        if completed.returncode < 0:
            return 128 - completed.returncode
        return completed.returncode

    def _child(self, stdin: TextIO | None, stdout: TextIO | None) -> Executor:
        child = Executor(_copy_env(self.env))
        child.stdin = stdin
        child.context.stdout = stdout
        child.context.stderr = self.context.stderr
        child.context.last_exit_status = self.context.last_exit_status
        return child

    def _run_isolated(self, node: Node | None) -> int:
        try:
            return self.execute(node)
        except ShellExit as exc:
            return exc.code
        except BrokenPipeError:
            return 1

    def execute_pipeline(self, node: Node) -> int:
        """Run both sides at once, the left's output feeding the right.

        Each side works on its own copy of the environment; the status is
        that of the right side.
        """
        read_fd, write_fd = os.pipe()
        writer = os.fdopen(write_fd, "w")
        reader = os.fdopen(read_fd, "r")
        left = self._child(self.stdin, writer)
        right = self._child(reader, self.context.stdout)

        def run_left() -> None:
            try:
                left._run_isolated(node.left)
            finally:
                try:
                    writer.close()
                except OSError:
                    pass

        cwd = _current_dir()
        thread = threading.Thread(target=run_left, daemon=True)
        thread.start()
        try:
            status = right._run_isolated(node.right)
        finally:
            reader.close()
            thread.join()
            _restore_dir(cwd)
        return status

    def execute_and(self, node: Node) -> int:
        """Run the right side only if the left succeeds."""
        status = self.execute(node.left)
        if status == 0:
            status = self.execute(node.right)
        return status

    def execute_or(self, node: Node) -> int:
        """Run the right side only if the left fails."""
        status = self.execute(node.left)
        if status != 0:
            status = self.execute(node.right)
        return status

    def execute_subshell(self, node: Node) -> int:
        """Run the group on a copy of the shell; its changes do not leak out."""
        cwd = _current_dir()
        child = self._child(self.stdin, self.context.stdout)
        try:
            return child._run_isolated(node.left)
        finally:
            _restore_dir(cwd)