"""The shell's ordered table of environment variables."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .textutil import split


def _is_ascii_alpha(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z"


def _is_ascii_alnum(c: str) -> bool:
    return _is_ascii_alpha(c) or "0" <= c <= "9"


def is_valid_name(name: str | None) -> bool:
    """Return True if ``name`` is a valid shell variable identifier."""
    if not name:
        return False
    first = name[0]
    if not (_is_ascii_alpha(first) or first == "_"):
        return False
    return all(_is_ascii_alnum(c) or c == "_" for c in name[1:])


class Environment:
    """Variables in insertion order; a value of None marks an exported name
    that has not been given a value."""

    def __init__(self) -> None:
        self._vars: dict[str, str | None] = {}

    @classmethod
    def from_strings(cls, envp: Iterable[str]) -> Environment:
        """Build an environment from ``NAME=value`` strings.

        Each entry is split on ``=`` with empty fields dropped; the first
        field is the name and the second the value.
        """
        env = cls()
        for entry in envp:
            fields = split(entry, "=")
            if not fields:
                continue
            value = fields[1] if len(fields) > 1 else ""
            env._vars.setdefault(fields[0], value)
        return env

    def get(self, name: str) -> str | None:
        """Return the value of ``name``, or None if unset or valueless."""
        return self._vars.get(name)

    def set(self, name: str, value: str | None) -> None:
        """Add or update a variable.

        An existing variable keeps its value when ``value`` is None.
        """
        if name in self._vars:
            if value is not None:
                self._vars[name] = value
            return
        self._vars[name] = value

    def unset(self, name: str) -> None:
        """Remove ``name`` if present."""
        self._vars.pop(name, None)

    def to_list(self, export_mode: bool = False) -> list[str]:
        """Return ``NAME=value`` strings in order.

        Valueless names are left out, or listed bare in export mode.
        """
        result = []
        for name, value in self._vars.items():
            if value is not None:
                result.append(f"{name}={value}")
            elif export_mode:
                result.append(name)
        return result

    def __len__(self) -> int:
        return len(self._vars)

    def __iter__(self) -> Iterator[tuple[str, str | None]]:
        """Yield ``(name, value)`` pairs in order."""
        return iter(list(self._vars.items()))