"""Building blocks of a small shell: token helpers, syntax checks, output redirection and builtins."""

__version__ = "0.1.0"

__all__ = ["tokens", "syntax", "output", "echo", "builtins", "strutils"]