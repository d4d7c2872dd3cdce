"""String helpers: splitting, trimming, slicing, searching, comparing and mapping."""

from __future__ import annotations

from collections.abc import Callable
from itertools import islice, zip_longest


def _require_char(sep: str) -> str:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError("separator must be a single character")
    return sep


def _require_non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the character *sep*, dropping empty words."""
    return [word for word in text.split(_require_char(sep)) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character of *text* found in *charset*."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* beginning at index *start*.

    A start at or past the end of the text yields an empty string.
    """
    _require_non_negative(start, "start")
    _require_non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, limit: int) -> int:
    """Find *needle* lying wholly within the first *limit* characters of *haystack*.

    Returns the index of the first match, or -1 when there is none.
    An empty needle always matches at index 0.
    """
    _require_non_negative(limit, "limit")
    if not needle:
        return 0
    return haystack.find(needle, 0, limit)


def strncmp(first: str, second: str, limit: int) -> int:
    """Compare at most *limit* characters of two strings.

    Returns the code difference of the first differing characters, where the
    end of a string counts as code 0, or 0 when no difference is found.
    """
    _require_non_negative(limit, "limit")
    pairs = zip_longest(first, second, fillvalue="\0")
    for a, b in islice(pairs, limit):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            return 0
    return 0


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, char) for index, char in enumerate(text))