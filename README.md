# pushswap

This package holds the two stacks of the push_swap puzzle, `a` and `b`, and
the puzzle's operations on them: `sa`, `sb`, `ss`, `pa`, `pb`, `ra`, `rb`,
`rr`, `rra`, `rrb` and `rrr`. It also checks command-line input and prints
the stacks.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

```
push_swap 3 -1 42 7
push_swap "3 -1 42 7"
```

You can give the numbers as separate arguments. You can also give them as one
string, split on spaces. Every token must be an optional `+` or `-` followed
by one or more digits. No two tokens may convert to the same integer.

If the input is valid, the command does the following and exits with status 0:

- It prints `Valor convertido: N` for each value.
- It prints stack `a` as lines of the form `Contenido: N Indice: I`, with the
  top of the stack first.
- It prints a blank line.
- It prints stack `b`, which is empty.

If the input is invalid, the command prints `Error` and exits with status 1.
When a token is not a number, the values converted before that token are
printed first. With no arguments the command prints nothing and exits with
status 0.

## Library

```python
from pushswap.stacks import StackPair

pair = StackPair([3, 1, 2])
pair.sa()    # swap the top two values of a
pair.pb()    # move the top of a onto b
pair.rra()   # move the bottom of a to its top
print(pair.operations)    # ['sa', 'pb', 'rra']
print(pair.indexed("a"))  # [(value, position), ...], top first
```

The top of each stack is its leftmost element. An operation returns `True`
when it takes effect. Each operation that takes effect is added by name to
`operations`. Some operations do nothing and return `False`:

- a swap or rotation of a stack that holds fewer than two values;
- a push from a stack that holds fewer than two values.

`ss`, `rr` and `rrr` are always recorded. `indexed` takes `"a"` or `"b"` and
raises `ValueError` for anything else.

### Other modules

- `pushswap.cli` holds the following:
  - `is_number` and `has_duplicates`.
  - `parse_arguments`. It returns the list of integers or raises
    `ArgumentError`, whose `parsed` holds the values read before the bad
    token.
  - `format_stack` and `main(argv=None)`.
- `pushswap.cformat` holds two functions that handle `%c %s %d %i %u %x %X
  %p %%`:
  - `format_string(template, *args)` returns the expanded text. An unknown
    conversion keeps only the character after `%`. A `None` template gives
    `""`. Too few arguments raise `TypeError`.
  - `printf(template, *args, stream=None)` writes that text to `stream`, or
    to standard output when `stream` is `None`. It returns the number of
    characters written.
- `pushswap.charclass` holds `atoi`, which skips leading whitespace, returns
  0 for more than one sign and wraps to 32 bits. It also holds `itoa`,
  `memchr`, `memcmp`, the ASCII tests `isalpha`, `isdigit`, `isalnum`,
  `isascii` and `isprint`, and `toupper` and `tolower`.
- `pushswap.strutil` holds `split`, which drops empty words, and `strtrim`,
  `substr`, `strncmp` and `strjoin`. It also holds `strmapi`, which calls
  `func(index, char)`. The search functions `strnstr`, `strchr` and
  `strrchr` return an offset or `None`.

## What it does not do

The package does not sort. It has no solver that chooses a sequence of
operations. The command checks the input, loads stack `a` and prints both
stacks, and nothing more.