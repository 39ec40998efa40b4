# minishell

Building blocks of a small shell, as a Python library with no third-party
dependencies.

## Modules

- `minishell.tokens`: the `Token` dataclass (`value`, `type`) and the
  `TokenType` enum (`WORD`, `PIPE`, `REDIR_IN`, `REDIR_OUT`, `HEREDOC`,
  `APPEND`, `SQUOTE`, `DQUOTE`, `END`). Lexical helpers each take a string
  and a position and return a token with the position after it:
  `extract_word`, `extract_single_quote`, `extract_double_quote`,
  `extract_out` (`>` / `>>`) and `extract_in` (`<` / `<<`). A quote with no
  closing partner raises `UnclosedQuoteError`; `extract_word` returns `None`
  when nothing can be taken. `skip_space` moves past whitespace, and
  `format_token_list` renders tokens one per line for debugging.
- `minishell.syntax`: `check_syntax(tokens)` runs `check_first_last_token`
  and `check_redirection`. It returns quietly for an accepted line and
  raises `ShellSyntaxError` with a bash-style message otherwise, for example
  ``bash: syntax error near unexpected token `newline'`` when a line ends in a
  redirection.
- `minishell.output`: `redirect_type` and `filename` find the first `>` or
  `>>` in a token list. `open_output(tokens, kind)` opens the named file,
  appending for `>>` and truncating otherwise, and returns an `OutputTarget`
  (also usable as a context manager). It returns `None` when no file name
  follows.
- `minishell.echo`: `echo_command` writes one argument token. Single-quoted
  text is written as is. Double-quoted and bare text get backslash handling
  and `$` expansion through `expand_dollar`: `$NAME` from the shell
  environment, `$?` the last exit status, `$$` the process id and `$0`
  `./minishell`. `check_n_flag` strips leading `-n` flags.
- `minishell.builtins`: `Shell` holds the environment as `NAME=value`
  strings and an `exit_status`. `Shell.from_environ()` copies the process
  environment, and `Shell.getenv` looks a name up. `run_command(tokens, shell)`
  dispatches to `echo`, `env` (`env_command`) or `pwd` (`pwd_command`),
  writing to a redirected file when the line has `>` or `>>`. Any other name
  prints `NAME: command not found`. `cd_command(line)` changes directory,
  to `$HOME` when the line is blank.
- `minishell.strutils`: small text helpers `atoi`, `itoa`, `split`,
  `strtrim`, `strnstr`, `strnstr_echo`, `power`, `is_digit_string` and the
  line generator `read_lines`.

## Example

```python
from minishell.builtins import Shell, run_command
from minishell.tokens import Token, TokenType, extract_word, skip_space

token, pos = extract_word("echo hello", 0)   # Token("echo", WORD), 4
pos = skip_space("echo hello", pos)          # 5

tokens = [
    Token("echo", TokenType.WORD),
    Token("hello", TokenType.WORD),
    Token(None, TokenType.END),
]
run_command(tokens, Shell.from_environ())    # prints "hello"
```

```python
from minishell.strutils import atoi, itoa, split, power, is_digit_string

atoi("  -42abc")        # -42
itoa(-2147483648)       # "-2147483648"
split("  sp l it", " ") # ["sp", "l", "it"]
power(2, 10)            # 1024
power(2, -1)            # 0
is_digit_string("123")  # True
```

## What it does not do

There is no interactive prompt, command-line entry point or function that
turns a whole input line into a token list. You build token lists from the
`extract_*` helpers yourself. Pipes and input redirections are recognised by
the syntax checks but never executed. Only the builtins above run, and no
external programs are started.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.