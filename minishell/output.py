"""Where a builtin writes its output: the terminal or a redirected file."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import pairwise
from typing import Optional, Sequence, TextIO

from minishell.tokens import Token, TokenType

_OUTPUT_REDIRECTIONS = (TokenType.APPEND, TokenType.REDIR_OUT)


@dataclass
class OutputTarget:
    """A file opened for an output redirection."""

    name: str
    kind: TokenType
    stream: TextIO

    def write(self, text: str) -> None:
        """Write ``text`` to the redirected file."""
        self.stream.write(text)

    def close(self) -> None:
        """Close the redirected file."""
        self.stream.close()

    def __enter__(self) -> "OutputTarget":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def redirect_type(tokens: Sequence[Token]) -> Optional[TokenType]:
    """Return the kind of the first ``>`` or ``>>`` in ``tokens``, if any."""
    for token in tokens:
        if token.type in _OUTPUT_REDIRECTIONS:
            return token.type
    return None


def filename(tokens: Sequence[Token]) -> Optional[str]:
    """Return the name that follows the first output redirection, if any."""
    for current, following in pairwise(tokens):
        if current.type in _OUTPUT_REDIRECTIONS:
            return following.value
    return None


def open_output(tokens: Sequence[Token], kind: TokenType) -> Optional[OutputTarget]:
    """Open the file named by the first output redirection.

    ``>>`` appends, anything else truncates. Returns ``None`` when no file
    name follows the redirection; an ``OSError`` propagates when the file
    cannot be opened.
    """
    name = filename(tokens)
    if name is None:
        return None
    mode = "a" if kind is TokenType.APPEND else "w"
    stream = open(name, mode, encoding="utf-8")
    return OutputTarget(name=name, kind=kind, stream=stream)