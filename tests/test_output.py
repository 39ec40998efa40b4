import pytest

from minishell.output import OutputTarget, filename, open_output, redirect_type
from minishell.tokens import Token, TokenType


def _line(*tokens):
    return [*tokens, Token(None, TokenType.END)]


def _redirected(kind, name):
    symbol = ">>" if kind is TokenType.APPEND else ">"
    return _line(
        Token("echo", TokenType.WORD),
        Token("hi", TokenType.WORD),
        Token(symbol, kind),
        Token(name, TokenType.WORD),
    )


def test_redirect_type_finds_output_redirection():
    tokens = _redirected(TokenType.REDIR_OUT, "f")
    assert redirect_type(tokens) is TokenType.REDIR_OUT


def test_redirect_type_returns_first_of_several():
    tokens = _line(
        Token(">>", TokenType.APPEND),
        Token("a", TokenType.WORD),
        Token(">", TokenType.REDIR_OUT),
        Token("b", TokenType.WORD),
    )
    assert redirect_type(tokens) is TokenType.APPEND


def test_redirect_type_ignores_input_redirection():
    tokens = _line(Token("<", TokenType.REDIR_IN), Token("a", TokenType.WORD))
    assert redirect_type(tokens) is None


def test_filename_is_token_after_redirection():
    tokens = _redirected(TokenType.APPEND, "out.txt")
    assert filename(tokens) == "out.txt"


def test_filename_none_without_redirection():
    assert filename(_line(Token("pwd", TokenType.WORD))) is None


def test_filename_none_when_redirection_is_last():
    assert filename([Token(">", TokenType.REDIR_OUT)]) is None


def test_open_output_truncates_and_writes(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("old content")
    tokens = _redirected(TokenType.REDIR_OUT, str(path))
    target = open_output(tokens, TokenType.REDIR_OUT)
    target.write("new")
    target.close()
    assert path.read_text() == "new"
    assert target.name == str(path)
    assert target.kind is TokenType.REDIR_OUT


def test_open_output_appends(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("first")
    tokens = _redirected(TokenType.APPEND, str(path))
    with open_output(tokens, TokenType.APPEND) as target:
        target.write("second")
    assert path.read_text() == "firstsecond"
    assert target.stream.closed


def test_open_output_none_without_name():
    tokens = _line(Token("pwd", TokenType.WORD))
    assert open_output(tokens, TokenType.REDIR_OUT) is None


def test_open_output_missing_directory_raises(tmp_path):
    tokens = _redirected(TokenType.REDIR_OUT, str(tmp_path / "missing" / "f"))
    with pytest.raises(FileNotFoundError):
        open_output(tokens, TokenType.REDIR_OUT)


def test_output_target_write_round_trip(tmp_path):
    path = tmp_path / "x"
    target = OutputTarget(str(path), TokenType.REDIR_OUT, open(path, "w"))
    target.write("abc")
    target.write("def")
    target.close()
    assert path.read_text() == "abcdef"