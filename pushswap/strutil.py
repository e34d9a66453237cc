"""String helpers: splitting, trimming, slicing, searching and comparing."""

from __future__ import annotations

from typing import Callable, Union

CharLike = Union[str, int]


def _as_char(char: CharLike) -> str:
    """Return ``char`` as a one-character string; integer codes are accepted."""
    if isinstance(char, bool):
        raise TypeError("expected a one-character string or an integer code")
    if isinstance(char, int):
        if not 0 <= char <= 0x10FFFF:
            raise ValueError(f"character code out of range: {char}")
        return chr(char)
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return char
    raise TypeError("expected a one-character string or an integer code")


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def split(text: str, separator: CharLike) -> list[str]:
    """Split ``text`` on a single separator character, dropping empty words."""
    sep = _as_char(separator)
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or beyond the end of the text yields an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strncmp(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters of two strings.

    Returns the difference between the codes of the first pair that differs,
    the end of a string counting as code 0, or 0 when no difference is found.
    """
    _check_non_negative("limit", limit)
    for position in range(limit):
        left = ord(first[position]) if position < len(first) else 0
        right = ord(second[position]) if position < len(second) else 0
        if left != right:
            return left - right
        if left == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, limit: int) -> int | None:
    """Return the offset of ``needle`` lying wholly within the first ``limit``
    characters of ``haystack``, or ``None``.  An empty needle is found at 0."""
    _check_non_negative("limit", limit)
    if not needle:
        return 0
    found = haystack.find(needle, 0, limit)
    return None if found < 0 else found


def strchr(text: str, char: CharLike) -> int | None:
    """Return the offset of the first occurrence of ``char`` in ``text``.

    Searching for the NUL character yields the length of the text.
    """
    target = _as_char(char)
    if target == "\0":
        found = text.find(target)
        return len(text) if found < 0 else found
    found = text.find(target)
    return None if found < 0 else found


def strrchr(text: str, char: CharLike) -> int | None:
    """Return the offset of the last occurrence of ``char`` in ``text``.

    Searching for the NUL character yields the length of the text.
    """
    target = _as_char(char)
    if target == "\0":
        return len(text)
    found = text.rfind(target)
    return None if found < 0 else found


def strjoin(first: str, second: str) -> str:
    """Return the two strings joined end to end."""
    return first + second


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string by applying ``func(index, char)`` to every character."""
    mapped = []
    for index, char in enumerate(text):
        result = func(index, char)
        if not isinstance(result, str):
            raise TypeError("mapping function must return a string")
        mapped.append(result)
    return "".join(mapped)