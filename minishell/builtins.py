"""Shell state and the builtin commands cd, env, pwd and echo."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence

from minishell.echo import echo_command
from minishell.output import OutputTarget, open_output, redirect_type
from minishell.tokens import Token, TokenType


@dataclass
class Shell:
    """State kept across command lines."""

    var_env: List[str] = field(default_factory=list)
    exit_status: int = 0

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "Shell":
        """Build a shell whose environment copies ``environ`` (the process's by default)."""
        if environ is None:
            environ = os.environ
        return cls(var_env=[f"{key}={value}" for key, value in environ.items()])

    def getenv(self, name: str) -> Optional[str]:
        """Return the value of ``name`` in the shell environment, if set."""
        for entry in self.var_env:
            key, sep, value = entry.partition("=")
            if sep and key == name:
                return value
        return None


def _write(out: Optional[OutputTarget], text: str) -> None:
    if out is not None:
        out.write(text)
    else:
        sys.stdout.write(text)


def cd_command(line: str) -> None:
    """Change directory to ``line``, or to ``$HOME`` when it is blank."""
    line = line.lstrip(" ")
    if not line:
        home = os.environ.get("HOME")
        try:
            if home is None:
                raise FileNotFoundError("HOME")
            os.chdir(home)
        except OSError:
            sys.stdout.write("cd: HOME not set\n")
        return
    try:
        os.chdir(line)
    except OSError:
        sys.stdout.write(f"cd: {line}: No such file or directory\n")


def env_command(shell: Shell, tokens: Sequence[Token], out: Optional[OutputTarget]) -> None:
    """Print the shell environment, one ``NAME=value`` per line."""
    following = tokens[1] if len(tokens) > 1 else Token(None, TokenType.END)
    if following.type in (TokenType.END, TokenType.APPEND, TokenType.REDIR_OUT):
        for entry in shell.var_env:
            _write(out, f"{entry}\n")
    else:
        sys.stdout.write(f"env: {following.value}: No such file or directory\n")


def pwd_command(out: Optional[OutputTarget]) -> None:
    """Print the current working directory."""
    _write(out, f"{os.getcwd()}\n")


def _run_builtin(tokens: Sequence[Token], shell: Shell, out: Optional[OutputTarget]) -> None:
    first = tokens[0]
    if first.type is not TokenType.WORD:
        return
    name = first.value or ""
    if name.startswith("env"):
        env_command(shell, tokens, out)
    elif name.startswith("pwd"):
        pwd_command(out)
    elif name == "echo":
        following = tokens[1] if len(tokens) > 1 else Token(None, TokenType.END)
        if following.type is TokenType.END:
            sys.stdout.write("\n")
        elif (following.value or "").startswith("-n"):
            echo_command(tokens[1:], True, out, shell)
        else:
            echo_command(tokens, False, out, shell)
    else:
        sys.stdout.write(f"{name}: command not found")


def run_command(tokens: Sequence[Token], shell: Shell) -> None:
    """Run the builtin named by the first token, honouring ``>`` and ``>>``."""
    if not tokens:
        return
    out = None
    kind = redirect_type(tokens)
    if kind is not None:
        try:
            out = open_output(tokens, kind)
        except OSError:
            sys.stdout.write("fopen failed\n")
            return
    try:
        _run_builtin(tokens, shell, out)
    finally:
        if out is not None:
            out.close()