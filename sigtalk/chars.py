"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

from typing import TypeVar

from sigtalk.printf import format_signed

_WHITESPACE = frozenset("\t\n\v\f\r ")
_UINT_MASK = 0xFFFFFFFF

CharLike = TypeVar("CharLike", int, str)


def _code(char: int | str) -> int:
    """Return the integer code of *char*, which is an int or a one-character string."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError("expected a single character")
        return ord(char)
    if isinstance(char, bool) or not isinstance(char, int):
        raise TypeError("expected an int or a one-character string")
    return char


def _wrap_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= (1 << 31) else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted and
    parsing stops at the first non-digit. Text without digits yields 0.
    The result wraps around as a 32-bit signed integer.
    """
    chars = iter(text)
    ch = next(chars, "")
    while ch in _WHITESPACE and ch:
        ch = next(chars, "")
    negative = False
    if ch in ("+", "-") and ch:
        negative = ch == "-"
        ch = next(chars, "")
    number = 0
    while ch and "0" <= ch <= "9":
        number = _wrap_int32(number * 10 + (ord(ch) - ord("0")))
        ch = next(chars, "")
    return _wrap_int32(-number if negative else number)


def itoa(number: int) -> str:
    """Render *number* as a signed 32-bit decimal string."""
    return format_signed(number)


def is_alpha(char: int | str) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(char)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(char: int | str) -> bool:
    """True for ASCII digits 0-9."""
    return 48 <= _code(char) <= 57


def is_alnum(char: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(char) or is_digit(char)


def is_ascii(char: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(char) <= 127


def is_print(char: int | str) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(char) <= 126


def to_lower(char: CharLike) -> CharLike:
    """Map A-Z to a-z; everything else is returned unchanged, in the same type."""
    code = _code(char)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(char, str) else code


def to_upper(char: CharLike) -> CharLike:
    """Map a-z to A-Z; everything else is returned unchanged, in the same type."""
    code = _code(char)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(char, str) else code