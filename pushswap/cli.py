"""Command line entry: read integers, validate them and print the stacks."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from pushswap.cformat import format_string, printf
from pushswap.charclass import atoi, isdigit
from pushswap.stacks import StackPair
from pushswap.strutil import split


class ArgumentError(ValueError):
    """Raised for invalid input; ``parsed`` holds the values read before it."""

    def __init__(self, message: str, parsed: Sequence[int] = ()) -> None:
        super().__init__(message)
        self.parsed = list(parsed)


def is_number(text: str) -> bool:
    """True for an optional sign followed by one or more decimal digits."""
    if not text:
        return False
    digits = text[1:] if text[0] in "+-" else text
    return bool(digits) and all(isdigit(char) for char in digits)


def has_duplicates(tokens: Sequence[str]) -> bool:
    """True when two tokens convert to the same integer."""
    seen: set[int] = set()
    for token in tokens:
        value = atoi(token)
        if value in seen:
            return True
        seen.add(value)
    return False


def parse_arguments(tokens: Sequence[str]) -> list[int]:
    """Convert tokens to integers, raising ``ArgumentError`` on bad input."""
    if has_duplicates(tokens):
        raise ArgumentError("duplicate values")
    values: list[int] = []
    for token in tokens:
        if not is_number(token):
            raise ArgumentError(f"not a number: {token!r}", values)
        values.append(atoi(token))
    return values


def format_stack(entries: Iterable[tuple[int, int]]) -> str:
    """Render ``(value, index)`` pairs one per line."""
    return "".join(
        format_string("Contenido: %d Indice: %d\n", value, index)
        for value, index in entries
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    tokens = split(args[0], " ") if len(args) == 1 else args
    try:
        values = parse_arguments(tokens)
    except ArgumentError as error:
        for value in error.parsed:
            printf("Valor convertido: %d\n", value)
        printf("Error\n")
        return 1
    for value in values:
        printf("Valor convertido: %d\n", value)
    pair = StackPair(values)
    printf("%s", format_stack(pair.indexed("a")))
    printf("\n")
    printf("%s", format_stack(pair.indexed("b")))
    return 0