"""Token model and the lexical helpers that cut a command line into tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional, Tuple

WHITESPACE = " \t\v\r\n\f"
WORD_STOPPERS = "|<> '\""


class TokenType(IntEnum):
    """Kinds of token a command line is made of."""

    WORD = 0
    PIPE = 1
    REDIR_IN = 2
    REDIR_OUT = 3
    HEREDOC = 4
    APPEND = 5
    SQUOTE = 6
    DQUOTE = 7
    END = 8


REDIRECTIONS = frozenset(
    {TokenType.REDIR_IN, TokenType.REDIR_OUT, TokenType.HEREDOC, TokenType.APPEND}
)


@dataclass(frozen=True)
class Token:
    """One lexical unit of a command line."""

    value: Optional[str]
    type: TokenType


class UnclosedQuoteError(ValueError):
    """Raised when a quoted section has no closing quote."""

    def __init__(self, quote: str, position: int) -> None:
        super().__init__(f"unclosed {quote} quote starting at position {position}")
        self.quote = quote
        self.position = position


def _extract_quoted(text: str, pos: int, quote: str, kind: TokenType) -> Tuple[Token, int]:
    start = pos + 1
    end = text.find(quote, start)
    if end == -1:
        raise UnclosedQuoteError(quote, pos)
    return Token(text[start:end], kind), end + 1


def extract_single_quote(text: str, pos: int) -> Tuple[Token, int]:
    """Read a single-quoted section whose opening quote is at ``pos``.

    Returns the token and the position just after the closing quote.
    """
    return _extract_quoted(text, pos, "'", TokenType.SQUOTE)


def extract_double_quote(text: str, pos: int) -> Tuple[Token, int]:
    """Read a double-quoted section whose opening quote is at ``pos``.

    Returns the token and the position just after the closing quote.
    """
    return _extract_quoted(text, pos, '"', TokenType.DQUOTE)


def extract_word(text: str, pos: int) -> Optional[Tuple[Token, int]]:
    """Read a bare word starting at ``pos``.

    The word stops at a pipe, a redirection, a space or a quote. Returns
    ``None`` when no character could be taken.
    """
    end = pos
    while end < len(text) and text[end] not in WORD_STOPPERS:
        end += 1
    if end == pos:
        return None
    return Token(text[pos:end], TokenType.WORD), end


def extract_out(text: str, pos: int) -> Tuple[Token, int]:
    """Read ``>`` or ``>>`` starting at ``pos``."""
    pos += 1
    if text[pos:pos + 1] == ">":
        return Token(">>", TokenType.APPEND), pos + 1
    return Token(">", TokenType.REDIR_OUT), pos


def extract_in(text: str, pos: int) -> Tuple[Token, int]:
    """Read ``<`` or ``<<`` starting at ``pos``."""
    pos += 1
    if text[pos:pos + 1] == "<":
        return Token("<<", TokenType.HEREDOC), pos + 1
    return Token("<", TokenType.REDIR_IN), pos


def skip_space(text: str, pos: int) -> int:
    """Return the first position at or after ``pos`` that is not whitespace."""
    while pos < len(text) and text[pos] in WHITESPACE:
        pos += 1
    return pos


def format_token_list(tokens: Iterable[Token]) -> str:
    """Render tokens one per line, as shown for debugging."""
    lines = []
    for token in tokens:
        if token.value is not None:
            lines.append(f"Token: [{token.value}], Type: {int(token.type)}\n")
        else:
            lines.append("Token: [NULL] ou Type: NULL \n")
    return "".join(lines)