import pytest

from minishell.tokens import (
    Token,
    TokenType,
    UnclosedQuoteError,
    extract_double_quote,
    extract_in,
    extract_out,
    extract_single_quote,
    extract_word,
    format_token_list,
    skip_space,
)


def test_token_type_numbers_appear_in_format():
    tokens = [
        Token("|", TokenType.PIPE),
        Token(">>", TokenType.APPEND),
        Token("x", TokenType.DQUOTE),
    ]
    assert format_token_list(tokens) == (
        "Token: [|], Type: 1\n"
        "Token: [>>], Type: 5\n"
        "Token: [x], Type: 7\n"
    )


def test_single_quote_extracts_content():
    text = "'hello world' rest"
    token, pos = extract_single_quote(text, 0)
    assert token == Token("hello world", TokenType.SQUOTE)
    assert text[pos - 1] == "'"
    assert text[pos:] == " rest"


def test_double_quote_extracts_content():
    text = 'echo "a $HOME b"'
    start = text.index('"')
    token, pos = extract_double_quote(text, start)
    assert token.type is TokenType.DQUOTE
    assert token.value == "a $HOME b"
    assert pos == len(text)


def test_empty_quotes_give_empty_value():
    token, pos = extract_single_quote("''", 0)
    assert token.value == ""
    assert pos == len("''")


@pytest.mark.parametrize("func,text", [
    (extract_single_quote, "'never closed"),
    (extract_double_quote, '"never closed'),
    (extract_double_quote, "\"mixed'"),
])
def test_unclosed_quotes_raise(func, text):
    with pytest.raises(UnclosedQuoteError):
        func(text, 0)


def test_word_stops_at_special_characters():
    for stopper in "|<> '\"":
        text = "abc" + stopper + "def"
        token, pos = extract_word(text, 0)
        assert token == Token("abc", TokenType.WORD)
        assert text[pos] == stopper


def test_word_runs_to_end_of_text():
    text = "ls"
    token, pos = extract_word(text, 0)
    assert token.value == text
    assert pos == len(text)


def test_word_invariant_value_is_slice():
    text = "echo foo-bar|cat"
    start = text.index("f")
    token, pos = extract_word(text, start)
    assert text[start:pos] == token.value


def test_word_returns_none_when_empty():
    assert extract_word("|x", 0) is None
    assert extract_word("", 0) is None


def test_extract_out_single_and_double():
    token, pos = extract_out("> f", 0)
    assert token == Token(">", TokenType.REDIR_OUT)
    assert pos == 1
    token, pos = extract_out(">> f", 0)
    assert token == Token(">>", TokenType.APPEND)
    assert pos == 2


def test_extract_in_single_and_double():
    token, pos = extract_in("<", 0)
    assert token == Token("<", TokenType.REDIR_IN)
    assert pos == 1
    token, pos = extract_in("<<EOF", 0)
    assert token == Token("<<", TokenType.HEREDOC)
    assert pos == 2


def test_skip_space_skips_all_whitespace_kinds():
    text = " \t\v\r\n\fword"
    assert text[skip_space(text, 0):] == "word"
    assert skip_space("   ", 0) == len("   ")
    assert skip_space("abc", 0) == 0


def test_format_token_list():
    tokens = [Token("ls", TokenType.WORD), Token(None, TokenType.END)]
    assert format_token_list(tokens) == (
        "Token: [ls], Type: 0\n" "Token: [NULL] ou Type: NULL \n"
    )


def test_format_token_list_empty():
    assert format_token_list([]) == ""