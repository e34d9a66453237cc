"""Character classification, integer conversion and byte-buffer helpers."""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset(" \t\n\v\f\r")
_SIGNS = frozenset("+-")


def _code(char: CharLike) -> int:
    """Return the character code of a one-character string or an integer."""
    if isinstance(char, bool):
        raise TypeError("expected a one-character string or an integer code")
    if isinstance(char, int):
        return char
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return ord(char)
    raise TypeError("expected a one-character string or an integer code")


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped and a run of sign characters is read; more
    than one sign character yields 0.  Digits are read until the first
    non-digit.  The result wraps like a 32-bit signed integer.
    """
    position = 0
    length = len(text)
    while position < length and text[position] in _WHITESPACE:
        position += 1

    sign = 1
    sign_count = 0
    while position < length and text[position] in _SIGNS:
        if text[position] == "-":
            sign = -1
        sign_count += 1
        position += 1
    if sign_count > 1:
        return 0

    start = position
    while position < length and "0" <= text[position] <= "9":
        position += 1
    digits = text[start:position]
    value = int(digits) if digits else 0
    return _wrap_int32(value * sign)


def itoa(number: int) -> str:
    """Render an integer in decimal, with a leading minus sign when negative."""
    return str(int(number))


def _check_count(count: int, *buffers: bytes) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError(
                f"count {count} exceeds buffer length {len(buffer)}"
            )


def memchr(data: bytes, value: int, count: int) -> int | None:
    """Return the offset of the first byte equal to ``value`` among the first
    ``count`` bytes of ``data``, or ``None`` if there is none."""
    _check_count(count, data)
    target = value & 0xFF
    found = bytes(data[:count]).find(target)
    return None if found < 0 else found


def memcmp(first: bytes, second: bytes, count: int) -> int:
    """Compare the first ``count`` bytes of two buffers.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    _check_count(count, first, second)
    for left, right in zip(bytes(first[:count]), bytes(second[:count])):
        if left != right:
            return left - right
    return 0


def isalpha(char: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(char)
    return 65 <= code <= 90 or 97 <= code <= 122


def isdigit(char: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return 48 <= _code(char) <= 57


def isalnum(char: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(char) or isdigit(char)


def isascii(char: CharLike) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(char) <= 127


def isprint(char: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(char) <= 126


def toupper(char: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; other input is unchanged.

    The result has the same type as the argument.
    """
    code = _code(char)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(char, str) else code


def tolower(char: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; other input is unchanged.

    The result has the same type as the argument.
    """
    code = _code(char)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(char, str) else code