"""Syntax checks run on a token list before a command is executed."""

from __future__ import annotations

from itertools import pairwise
from typing import List, Sequence

from minishell.tokens import REDIRECTIONS, Token, TokenType


class ShellSyntaxError(Exception):
    """A command line that the shell refuses to run."""


def _up_to_end(tokens: Sequence[Token]) -> List[Token]:
    result = []
    for token in tokens:
        if token.type is TokenType.END:
            break
        result.append(token)
    return result


def check_first_last_token(tokens: Sequence[Token]) -> None:
    """Reject a line that starts with a pipe or ends with a pipe or redirection."""
    if not tokens:
        return
    if tokens[0].type is TokenType.PIPE:
        raise ShellSyntaxError("bash: syntax error near unexpected token `|'")
    body = _up_to_end(tokens)
    if not body:
        return
    last = body[-1]
    if last.type is TokenType.PIPE:
        raise ShellSyntaxError("bash: syntax error: unexpected end of file")
    if last.type in REDIRECTIONS:
        raise ShellSyntaxError("bash: syntax error near unexpected token `newline'")


_OUT_ANY = {TokenType.REDIR_IN, TokenType.APPEND, TokenType.REDIR_OUT, TokenType.HEREDOC}

_FORBIDDEN_AFTER = (
    (TokenType.REDIR_IN, {TokenType.REDIR_OUT, TokenType.APPEND}, ">"),
    (TokenType.REDIR_OUT, {TokenType.REDIR_IN, TokenType.HEREDOC}, "<"),
    (TokenType.HEREDOC, _OUT_ANY, "<<"),
    (TokenType.APPEND, _OUT_ANY, ">>"),
)

_PIPE_FORBIDDEN_AFTER = {TokenType.REDIR_IN, TokenType.APPEND, TokenType.HEREDOC}


def check_redirection(tokens: Sequence[Token]) -> None:
    """Reject redirection operators followed by an operator they cannot take."""
    for current, following in pairwise(tokens):
        if current.type is TokenType.END:
            return
        for kind, forbidden, shown in _FORBIDDEN_AFTER:
            if current.type is kind and following.type in forbidden:
                raise ShellSyntaxError(
                    f"bash: syntax error near unexpected token `{shown}'"
                )
        if current.type in _PIPE_FORBIDDEN_AFTER and following.type is TokenType.PIPE:
            raise ShellSyntaxError("bash: syntax error near unexpected token `|'")


def check_syntax(tokens: Sequence[Token]) -> None:
    """Run every syntax check, raising ShellSyntaxError on the first failure."""
    check_first_last_token(tokens)
    check_redirection(tokens)