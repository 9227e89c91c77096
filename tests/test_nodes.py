import pytest

from minishell.nodes import Node, NodeType, Redirection, format_ast
from minishell.tokens import TokenType

START = "--- AST Start ---"
END = "---- AST End ----"


def test_format_empty_tree():
    assert format_ast(None) == f"{START}\n{END}\n"


def test_command_constructor():
    node = Node.command(["ls", "-l"], [Redirection(TokenType.REDIR_OUT, "out")])
    assert node.type is NodeType.COMMAND
    assert node.args == ["ls", "-l"]
    assert node.redirections == [Redirection(TokenType.REDIR_OUT, "out")]
    assert node.left is None and node.right is None


def test_command_without_redirections():
    node = Node.command(["pwd"])
    assert node.redirections == []


def test_format_command_with_redirections():
    node = Node.command(
        ["cat", "-e"],
        [
            Redirection(TokenType.REDIR_IN, "in"),
            Redirection(TokenType.APPEND, "log"),
            Redirection(TokenType.HEREDOC, "eof"),
        ],
    )
    expected = "\n".join(
        [
            START,
            "NODE_COMMAND",
            "  Args: [cat] [-e] ",
            "  Redirs:",
            "    < in",
            "    >> log",
            "    << eof",
            END,
        ]
    ) + "\n"
    assert format_ast(node) == expected


def test_format_pipe_tree():
    tree = Node.binary(NodeType.PIPE, Node.command(["ls"]), Node.command(["wc"]))
    expected = "\n".join(
        [
            START,
            "NODE_PIPE (|)",
            "LEFT:",
            "  NODE_COMMAND",
            "    Args: [ls] ",
            "RIGHT:",
            "  NODE_COMMAND",
            "    Args: [wc] ",
            END,
        ]
    ) + "\n"
    assert format_ast(tree) == expected


def test_format_subshell_and_logical():
    inner = Node.binary(NodeType.OR, Node.command(["a"]), Node.command(["b"]))
    tree = Node.binary(NodeType.AND, Node.subshell(inner), Node.command(["c"]))
    lines = format_ast(tree).splitlines()
    assert lines[1] == "NODE_AND (&&)"
    assert "  NODE_SUBSHELL ()" in lines
    assert "    NODE_OR (||)" in lines
    assert lines[-1] == END


def test_subshell_holds_inner_on_left():
    inner = Node.command(["echo"])
    node = Node.subshell(inner)
    assert node.type is NodeType.SUBSHELL
    assert node.left is inner
    assert node.right is None


def test_binary_rejects_non_binary_type():
    with pytest.raises(ValueError):
        Node.binary(NodeType.COMMAND, Node.command(["a"]), Node.command(["b"]))


def test_redirection_rejects_non_redirect_type():
    with pytest.raises(ValueError):
        Redirection(TokenType.PIPE, "x")


def test_redirection_symbol():
    assert Redirection(TokenType.REDIR_OUT, "f").symbol == ">"
    assert Redirection(TokenType.HEREDOC, "f").symbol == "<<"