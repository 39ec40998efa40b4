"""String helpers used by the shell: number parsing, splitting, searching and line reading."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator, List, Optional

_SPACES = "\t\n\v\f\r "
_DIGITS = "0123456789"
_INT_BITS = 32


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring leading whitespace.

    A ``+`` is accepted unless a ``-`` follows it; a ``-`` is accepted only
    when a digit follows it. Anything unparsable yields 0, and the result
    wraps like a 32-bit signed integer.
    """
    pos = 0
    while pos < len(text) and text[pos] in _SPACES:
        pos += 1
    sign = 1
    if text[pos:pos + 1] == "+" and text[pos + 1:pos + 2] != "-":
        pos += 1
    nxt = text[pos + 1:pos + 2]
    if text[pos:pos + 1] == "-" and nxt and nxt in _DIGITS:
        sign = -1
        pos += 1
    start = pos
    while pos < len(text) and text[pos] in _DIGITS:
        pos += 1
    digits = text[start:pos]
    number = int(digits) if digits else 0
    return _wrap_int32(number * sign)


def itoa(n: int) -> str:
    """Return the decimal text of the 32-bit integer ``n``."""
    return str(_wrap_int32(int(n)))


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    if not sep or sep == "\0":
        return [text] if text else []
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: Optional[str], charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if text is None:
        return ""
    if not charset:
        return text
    return text.strip(charset)


def _find_within(haystack: str, needle: str, limit: int) -> int:
    if limit <= 0:
        return -1
    return haystack[:limit].find(needle)


def strnstr(haystack: str, needle: str, limit: int) -> Optional[str]:
    """Find ``needle`` within the first ``limit`` characters of ``haystack``.

    Returns the rest of ``haystack`` from the match, ``haystack`` itself for
    an empty needle, or ``None`` when there is no match.
    """
    if not needle:
        return haystack
    index = _find_within(haystack, needle, limit)
    if index == -1:
        return None
    return haystack[index:]


def strnstr_echo(haystack: str, needle: str, limit: int) -> Optional[str]:
    """Like :func:`strnstr`, but on a match return ``haystack`` past the needle's length.

    The returned text always starts at offset ``len(needle)`` of ``haystack``,
    wherever the match was found.
    """
    if not needle:
        return haystack
    if _find_within(haystack, needle, limit) == -1:
        return None
    return haystack[len(needle):]


def power(num: int, exponent: int) -> int:
    """Raise ``num`` to ``exponent``; negative exponents give 0.

    The result wraps like a 32-bit signed integer.
    """
    if exponent < 0:
        return 0
    return _wrap_int32(num ** exponent)


def is_digit_string(text: str) -> bool:
    """Tell whether every character of ``text`` is an ASCII digit (true when empty)."""
    return all(char in _DIGITS for char in text)


def read_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield the lines of ``stream`` one at a time, each keeping its newline.

    The last line is yielded without a newline when the stream does not end
    with one. Nothing is yielded for an empty stream.
    """
    while True:
        line = stream.readline()
        if not line:
            return
        yield line