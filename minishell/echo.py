"""The echo builtin and dollar expansion."""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

from minishell.output import OutputTarget
from minishell.tokens import Token, TokenType

if TYPE_CHECKING:
    from minishell.builtins import Shell

_DOUBLE_QUOTE_ESCAPES = "\\$`"
_PROGRAM_NAME = "./minishell"


def _write(out: Optional[OutputTarget], text: str) -> None:
    if out is not None:
        out.write(text)
    else:
        sys.stdout.write(text)


def _is_name_char(char: str) -> bool:
    return char == "_" or (char.isascii() and char.isalnum())


def expand_dollar(text: str, pos: int, shell: "Shell") -> Tuple[str, int]:
    """Expand the ``$`` found at ``pos``.

    Returns the expansion and the position just after what was consumed.
    ``$?`` gives the last exit status, ``$$`` the process id and ``$0`` the
    program name; a bare ``$`` stays as it is.
    """
    pos += 1
    char = text[pos:pos + 1]
    if not char or not (_is_name_char(char) or char in "?$"):
        return "$", pos
    if char == "?":
        return str(shell.exit_status), pos + 1
    if char == "$":
        return str(os.getpid()), pos + 1
    if char == "0":
        return _PROGRAM_NAME, pos + 1
    end = pos
    while end < len(text) and _is_name_char(text[end]):
        end += 1
    return shell.getenv(text[pos:end]) or "", end


def check_n_flag(text: str) -> Tuple[bool, str]:
    """Strip leading ``-n`` flags, returning whether any were found and the rest."""
    n_flag = False
    while text.startswith("-n"):
        text = text[2:]
        n_flag = True
    return n_flag, text


def _render_double_quote(text: str, shell: "Shell") -> str:
    parts = []
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char == "\\":
            pos += 1
            if pos >= len(text):
                parts.append("\\")
                break
            escaped = text[pos]
            parts.append(escaped if escaped in _DOUBLE_QUOTE_ESCAPES else "\\" + escaped)
            pos += 1
        elif char == "$":
            expansion, pos = expand_dollar(text, pos, shell)
            parts.append(expansion)
        else:
            parts.append(char)
            pos += 1
    return "".join(parts)


def _render_plain(text: str, shell: "Shell") -> str:
    parts = []
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char == "$":
            expansion, pos = expand_dollar(text, pos, shell)
            parts.append(expansion)
        elif char == "\\":
            pos += 1
            if pos < len(text):
                parts.append("\\" + text[pos])
                pos += 1
        else:
            parts.append(char)
            pos += 1
    return "".join(parts)


def echo_command(
    tokens: Sequence[Token],
    n_flag: bool,
    out: Optional[OutputTarget],
    shell: "Shell",
) -> None:
    """Echo the token that follows ``tokens[0]``.

    Single-quoted text is written as is; double-quoted and bare text have
    dollar expansion and backslash handling. A newline follows only when
    writing to the terminal without ``-n``; appending to a file writes a
    newline first.
    """
    arg = tokens[1] if len(tokens) > 1 else None
    if arg is None or not arg.value:
        return
    if out is not None and out.kind is TokenType.APPEND:
        out.write("\n")
    if arg.type is TokenType.SQUOTE:
        rendered = arg.value
    elif arg.type is TokenType.DQUOTE:
        rendered = _render_double_quote(arg.value, shell)
    else:
        rendered = _render_plain(arg.value, shell)
    _write(out, rendered)
    if not n_flag and out is None:
        sys.stdout.write("\n")