"""Lexical analysis of a command line into tokens."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_SPACES = frozenset(" \f\n\r\t\v")
_METACHARACTERS = frozenset("|<>&()")
_QUOTES = ("'", '"')


class TokenType(enum.Enum):
    """Kinds of token produced by the lexer."""

    WORD = enum.auto()
    REDIR_IN = enum.auto()
    REDIR_OUT = enum.auto()
    APPEND = enum.auto()
    HEREDOC = enum.auto()
    PIPE = enum.auto()
    AND = enum.auto()
    OR = enum.auto()
    LPAREN = enum.auto()
    RPAREN = enum.auto()

    @property
    def is_redirection(self) -> bool:
        return self in _REDIRECTIONS


_REDIRECTIONS = frozenset(
    {TokenType.REDIR_IN, TokenType.REDIR_OUT, TokenType.APPEND, TokenType.HEREDOC}
)

# Longer operators first so that "||" wins over "|".
_OPERATORS = (
    ("||", TokenType.OR),
    ("|", TokenType.PIPE),
    ("<<", TokenType.HEREDOC),
    ("<", TokenType.REDIR_IN),
    (">>", TokenType.APPEND),
    (">", TokenType.REDIR_OUT),
    ("&&", TokenType.AND),
    ("(", TokenType.LPAREN),
    (")", TokenType.RPAREN),
)


@dataclass(frozen=True)
class Token:
    """A single lexical token and its source text."""

    type: TokenType
    value: str


class LexerError(Exception):
    """Raised when a line cannot be split into tokens."""


def is_space(c: str) -> bool:
    """Return True for the whitespace characters that separate words."""
    return c in _SPACES and c != ""


def is_metacharacter(c: str) -> bool:
    """Return True for characters that start an operator."""
    return c in _METACHARACTERS and c != ""


def _scan_operator(line: str, start: int) -> Token | None:
    for text, token_type in _OPERATORS:
        if line.startswith(text, start):
            return Token(token_type, text)
    return None


def _scan_word(line: str, start: int) -> Token | None:
    first = line[start]
    if first in _QUOTES:
        end = line.find(first, start + 1)
        if end == -1:
            return None
        return Token(TokenType.WORD, line[start : end + 1])
    end = start
    while end < len(line) and not is_space(line[end]) and not is_metacharacter(line[end]):
        end += 1
    if end == start:
        return None
    return Token(TokenType.WORD, line[start:end])


def tokenize(line: str) -> list[Token]:
    """Split a command line into tokens.

    Quoted words keep their quotes. A lone ``&`` or an unterminated quote
    raises :class:`LexerError`.
    """
    tokens: list[Token] = []
    pos = 0
    length = len(line)
    while True:
        while pos < length and is_space(line[pos]):
            pos += 1
        if pos >= length:
            break
        token = _scan_operator(line, pos) or _scan_word(line, pos)
        if token is None:
            raise LexerError("syntax error: unclosed quote")
        tokens.append(token)
        pos += len(token.value)
    return tokens


def format_tokens(tokens) -> str:
    """Render tokens as ``[a]->[b]->[c]``."""
    return "->".join(f"[{token.value}]" for token in tokens)