"""Syntax tree nodes and their debug rendering."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .tokens import TokenType


class NodeType(enum.Enum):
    """Kinds of syntax tree node."""

    COMMAND = enum.auto()
    PIPE = enum.auto()
    AND = enum.auto()
    OR = enum.auto()
    SUBSHELL = enum.auto()


_BINARY_TYPES = frozenset({NodeType.PIPE, NodeType.AND, NodeType.OR})

_REDIRECTION_SYMBOLS = {
    TokenType.REDIR_IN: "<",
    TokenType.REDIR_OUT: ">",
    TokenType.APPEND: ">>",
    TokenType.HEREDOC: "<<",
}

_NODE_LABELS = {
    NodeType.COMMAND: "NODE_COMMAND",
    NodeType.PIPE: "NODE_PIPE (|)",
    NodeType.AND: "NODE_AND (&&)",
    NodeType.OR: "NODE_OR (||)",
    NodeType.SUBSHELL: "NODE_SUBSHELL ()",
}


@dataclass(frozen=True)
class Redirection:
    """A redirection attached to a command: its kind and target word."""

    type: TokenType
    target: str

    def __post_init__(self) -> None:
        if not self.type.is_redirection:
            raise ValueError(f"{self.type.name} is not a redirection")

    @property
    def symbol(self) -> str:
        return _REDIRECTION_SYMBOLS[self.type]


@dataclass
class Node:
    """A node of the syntax tree."""

    type: NodeType
    args: list[str] = field(default_factory=list)
    redirections: list[Redirection] = field(default_factory=list)
    left: Node | None = None
    right: Node | None = None

    @classmethod
    def command(cls, args, redirections=None) -> Node:
        """A simple command with its words and redirections."""
        return cls(NodeType.COMMAND, list(args), list(redirections or ()))

    @classmethod
    def binary(cls, node_type, left, right) -> Node:
        """A pipe, ``&&`` or ``||`` node joining two subtrees."""
        if node_type not in _BINARY_TYPES:
            raise ValueError(f"{node_type} is not a binary node type")
        return cls(node_type, left=left, right=right)

    @classmethod
    def subshell(cls, inner) -> Node:
        """A parenthesised group run in a child shell."""
        return cls(NodeType.SUBSHELL, left=inner)


def _render(node: Node, level: int):
    pad = "  " * level
    yield pad + _NODE_LABELS[node.type]
    if node.type is NodeType.COMMAND:
        yield pad + "  Args: " + "".join(f"[{arg}] " for arg in node.args)
        if node.redirections:
            yield pad + "  Redirs:"
            for redirection in node.redirections:
                yield f"{pad}    {redirection.symbol} {redirection.target}"
    if node.left is not None:
        yield pad + "LEFT:"
        yield from _render(node.left, level + 1)
    if node.right is not None:
        yield pad + "RIGHT:"
        yield from _render(node.right, level + 1)


def format_ast(node: Node | None) -> str:
    """Render a tree as an indented, human-readable listing."""
    lines = ["--- AST Start ---"]
    if node is not None:
        lines.extend(_render(node, 0))
    lines.append("---- AST End ----")
    return "\n".join(lines) + "\n"