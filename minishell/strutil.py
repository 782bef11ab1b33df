"""Small string helpers used by the shell's parser and environment code."""

from __future__ import annotations

import string
from itertools import islice, zip_longest

_WHITESPACE = " \t\n\v\f\r"
_ALNUM = frozenset(string.ascii_letters + string.digits)
_INT_MIN = -(2**31)
_INT_RANGE = 2**32


def _wrap_int32(value: int) -> int:
    return (value - _INT_MIN) % _INT_RANGE + _INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one sign is accepted, and parsing stops at
    the first non-digit. The result wraps around like a 32-bit int.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        value = _wrap_int32(value * 10 + int(char))
    return _wrap_int32(value * sign)


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return str(number)


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def strtrim(text: str, chars: str | None) -> str:
    """Strip any characters of ``chars`` from both ends of ``text``."""
    if not chars:
        return text
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, limit: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``limit`` characters.

    Returns the index of the first match, or None when there is none.
    """
    index = haystack[:max(limit, 0)].find(needle)
    return None if index < 0 else index


def strncmp(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters; the sign gives the ordering."""
    pairs = zip_longest(first, second, fillvalue="\0")
    for a, b in islice(pairs, max(limit, 0)):
        if a != b:
            return ord(a) - ord(b)
    return 0


def is_alnum(char: str) -> bool:
    """True for a single ASCII letter or digit."""
    return char in _ALNUM