"""The two stacks of the puzzle and the operations that move values between them."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable


class StackPair:
    """Stacks ``a`` and ``b``. The top of each stack is its leftmost element.

    Each operation that takes effect is recorded by name in ``operations``.
    A swap, rotation or reverse rotation of a stack with fewer than two values
    does nothing and records nothing. A push needs at least two values on the
    stack it takes from. The combined operations ``ss``, ``rr`` and ``rrr``
    are always recorded.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: Deque[int] = deque(values)
        self.b: Deque[int] = deque()
        self.operations: list[str] = []

    def _emit(self, name: str) -> None:
        self.operations.append(name)

    @staticmethod
    def _swap(stack: Deque[int]) -> bool:
        if len(stack) < 2:
            return False
        first = stack.popleft()
        second = stack.popleft()
        stack.appendleft(first)
        stack.appendleft(second)
        return True

    @staticmethod
    def _rotate(stack: Deque[int], steps: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(steps)
        return True

    @staticmethod
    def _push(source: Deque[int], target: Deque[int]) -> bool:
        if len(source) < 2:
            return False
        target.appendleft(source.popleft())
        return True

    def _single(self, done: bool, name: str) -> bool:
        if done:
            self._emit(name)
        return done

    def sa(self) -> bool:
        """Swap the two top values of ``a``."""
        return self._single(self._swap(self.a), "sa")

    def sb(self) -> bool:
        """Swap the two top values of ``b``."""
        return self._single(self._swap(self.b), "sb")

    def ss(self) -> bool:
        """Swap the top values of both stacks."""
        self._swap(self.a)
        self._swap(self.b)
        self._emit("ss")
        return True

    def ra(self) -> bool:
        """Move the top value of ``a`` to its bottom."""
        return self._single(self._rotate(self.a, -1), "ra")

    def rb(self) -> bool:
        """Move the top value of ``b`` to its bottom."""
        return self._single(self._rotate(self.b, -1), "rb")

    def rr(self) -> bool:
        """Rotate both stacks upwards."""
        self._rotate(self.a, -1)
        self._rotate(self.b, -1)
        self._emit("rr")
        return True

    def rra(self) -> bool:
        """Move the bottom value of ``a`` to its top."""
        return self._single(self._rotate(self.a, 1), "rra")

    def rrb(self) -> bool:
        """Move the bottom value of ``b`` to its top."""
        return self._single(self._rotate(self.b, 1), "rrb")

    def rrr(self) -> bool:
        """Rotate both stacks downwards."""
        self._rotate(self.a, 1)
        self._rotate(self.b, 1)
        self._emit("rrr")
        return True

    def pa(self) -> bool:
        """Move the top value of ``b`` onto ``a``."""
        return self._single(self._push(self.b, self.a), "pa")

    def pb(self) -> bool:
        """Move the top value of ``a`` onto ``b``."""
        return self._single(self._push(self.a, self.b), "pb")

    def indexed(self, stack: str) -> list[tuple[int, int]]:
        """Return ``(value, position)`` pairs of stack ``"a"`` or ``"b"``, top first."""
        if stack == "a":
            values = self.a
        elif stack == "b":
            values = self.b
        else:
            raise ValueError(f"unknown stack {stack!r}; expected 'a' or 'b'")
        return [(value, position) for position, value in enumerate(values)]