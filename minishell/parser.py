"""Recursive-descent parser turning tokens into a syntax tree."""

from __future__ import annotations

from collections.abc import Iterable

from .nodes import Node, NodeType, Redirection
from .tokens import Token, TokenType

_COMMAND_END = frozenset(
    {TokenType.PIPE, TokenType.RPAREN, TokenType.AND, TokenType.OR}
)

_LOGICAL = {TokenType.AND: NodeType.AND, TokenType.OR: NodeType.OR}

_NEWLINE_QUOTED = "syntax error near unexpected token 'newline'"
_NEWLINE_BACKTICK = "syntax error near unexpected token `newline'"


class ParseError(Exception):
    """Raised when the tokens do not form a valid command line."""


class Parser:
    """Parse a token sequence into a tree of :class:`Node` objects.

    Grammar, loosest binding first::

        logical  := pipe (("&&" | "||") pipe)*
        pipe     := subshell ("|" subshell)*
        subshell := "(" logical ")" | command
        command  := (WORD | redirection WORD)*
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = list(tokens)
        self._pos = 0

    def _peek(self) -> Token | None:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _advance(self) -> Token:
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def parse_logical(self) -> Node | None:
        """Parse a chain of pipelines joined by ``&&`` and ``||``."""
        left = self.parse_pipe()
        if left is None:
            return None
        while (token := self._peek()) is not None and token.type in _LOGICAL:
            self._advance()
            if self._peek() is None:
                raise ParseError(_NEWLINE_QUOTED)
            right = self.parse_pipe()
            if right is None:
                raise ParseError(_NEWLINE_QUOTED)
            left = Node.binary(_LOGICAL[token.type], left, right)
        return left

    def parse_pipe(self) -> Node | None:
        """Parse commands or groups joined by ``|``."""
        left = self.parse_subshell()
        if left is None:
            return None
        while (token := self._peek()) is not None and token.type is TokenType.PIPE:
            self._advance()
            right = self.parse_subshell()
            if right is None:
                raise ParseError(_NEWLINE_QUOTED)
            left = Node.binary(NodeType.PIPE, left, right)
        return left

    def parse_subshell(self) -> Node | None:
        """Parse a parenthesised group or a simple command."""
        token = self._peek()
        if token is None:
            return None
        if token.type is not TokenType.LPAREN:
            return self.parse_command()
        self._advance()
        inner = self.parse_logical()
        closing = self._peek()
        if inner is None or closing is None or closing.type is not TokenType.RPAREN:
            raise ParseError("unclosed parenthesis")
        self._advance()
        return Node.subshell(inner)

    def parse_command(self) -> Node:
        """Parse words and redirections up to the next operator."""
        args: list[str] = []
        redirections: list[Redirection] = []
        while (token := self._peek()) is not None and token.type not in _COMMAND_END:
            if token.type is TokenType.WORD:
                args.append(self._advance().value)
            elif token.type.is_redirection:
                self._advance()
                target = self._peek()
                if target is None or target.type is not TokenType.WORD:
                    raise ParseError(_NEWLINE_BACKTICK)
                self._advance()
                redirections.append(Redirection(token.type, target.value))
            else:
                raise ParseError(f"syntax error near unexpected token `{token.value}'")
        return Node.command(args, redirections)


def parse(tokens: Iterable[Token]) -> Node | None:
    """Parse tokens into a tree; return None when there are no tokens."""
    return Parser(tokens).parse_logical()