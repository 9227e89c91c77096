"""A small interactive shell with pipes, logical operators, subshells and builtins."""

__version__ = "0.1.0"
__all__ = ["__version__"]