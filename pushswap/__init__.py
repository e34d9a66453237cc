"""Two-stack integer puzzle: stack operations, input checking and formatting helpers."""

__version__ = "0.1.0"
__all__ = ["charclass", "strutil", "cformat", "stacks", "cli"]