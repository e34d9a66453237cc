"""A small printf-style formatter supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

from pushswap.charclass import itoa

_UINT32_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF
_INT32_LIMIT = 0x80000000

_CONVERSIONS = frozenset("siducxXp%")


def _require_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"%{conversion} expects an integer, got {type(value).__name__}"
        )
    return value


def _as_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - 0x100000000 if value >= _INT32_LIMIT else value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _format_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _format_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = _require_int(value, "p") & _ULONG_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(
            f"not enough arguments for %{conversion} conversion"
        ) from None
    if conversion == "s":
        return _format_str(value)
    if conversion in ("d", "i"):
        return itoa(_as_int32(_require_int(value, conversion)))
    if conversion == "u":
        return str(_require_int(value, conversion) & _UINT32_MASK)
    if conversion == "c":
        return _format_char(value)
    if conversion == "x":
        return f"{_require_int(value, conversion) & _UINT32_MASK:x}"
    if conversion == "X":
        return f"{_require_int(value, conversion) & _UINT32_MASK:X}"
    return _format_pointer(value)


def format_string(template: str | None, *args: Any) -> str:
    """Expand ``template`` with ``args`` and return the resulting text.

    An unknown conversion drops the ``%`` and keeps the character after it.
    A ``None`` template yields an empty string.  Surplus arguments are
    ignored; too few raise ``TypeError``.
    """
    if template is None:
        return ""
    values = iter(args)
    pieces: list[str] = []
    chars = iter(template)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        conversion = next(chars, None)
        if conversion is None:
            raise ValueError("format string ends with an incomplete conversion")
        if conversion in _CONVERSIONS:
            pieces.append(_convert(conversion, values))
        else:
            pieces.append(conversion)
    return "".join(pieces)


def printf(template: str | None, *args: Any, stream: TextIO | None = None) -> int:
    """Write the expanded template to ``stream`` (standard output by default)
    and return the number of characters written."""
    text = format_string(template, *args)
    if text:
        (sys.stdout if stream is None else stream).write(text)
    return len(text)