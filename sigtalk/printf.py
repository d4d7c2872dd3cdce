"""A small printf supporting the conversions %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

_UINT_MASK = 0xFFFFFFFF
_SIZE_MASK = 0xFFFFFFFFFFFFFFFF
_INT_MIN = -(1 << 31)


def _as_uint32(value: int) -> int:
    return int(value) & _UINT_MASK


def _as_int32(value: int) -> int:
    value = _as_uint32(value)
    return value - (1 << 32) if value >= (1 << 31) else value


def format_hex(value: int, upper: bool = False) -> str:
    """Render *value* as an unsigned 32-bit number in hexadecimal."""
    text = format(_as_uint32(value), "x")
    return text.upper() if upper else text


def format_pointer(address: int | None) -> str:
    """Render an address as ``0x``-prefixed lower-case hex, or ``(nil)`` for zero."""
    if not address:
        return "(nil)"
    return "0x" + format(int(address) & _SIZE_MASK, "x")


def format_string(value: str | None) -> str:
    """Return the string itself, or ``(null)`` when it is missing."""
    return "(null)" if value is None else str(value)


def format_unsigned(value: int) -> str:
    """Render *value* as an unsigned 32-bit decimal number."""
    return str(_as_uint32(value))


def format_signed(value: int) -> str:
    """Render *value* as a signed 32-bit decimal number."""
    number = _as_int32(value)
    if number == _INT_MIN:
        return "-2147483648"
    return str(number)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec in ("d", "i"):
        return format_signed(_next_arg(args, spec))
    if spec == "s":
        return format_string(_next_arg(args, spec))
    if spec == "c":
        return _format_char(_next_arg(args, spec))
    if spec == "p":
        return format_pointer(_next_arg(args, spec))
    if spec == "u":
        return format_unsigned(_next_arg(args, spec))
    if spec == "%":
        return "%"
    if spec == "x":
        return format_hex(_next_arg(args, spec), upper=False)
    if spec == "X":
        return format_hex(_next_arg(args, spec), upper=True)
    # Unknown conversions produce nothing and consume no argument.
    return ""


def sprintf(fmt: str, *args: Any) -> str:
    """Format *args* according to *fmt* and return the resulting text."""
    pieces: list[str] = []
    arg_iter = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("%")
        else:
            pieces.append(_convert(spec, arg_iter))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to *stream* (stdout by default); return its length."""
    text = sprintf(fmt, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    out.flush()
    return len(text)