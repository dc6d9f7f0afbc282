"""Stack and queue containers built from plain lists."""

from __future__ import annotations

from typing import Generic, TypeVar

__all__ = ["MinStack", "TwoStackQueue"]

T = TypeVar("T")


class MinStack(Generic[T]):
    """A stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._entries: list[tuple[T, T]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, val: T) -> None:
        """Push ``val`` onto the stack."""
        smallest = min(val, self._entries[-1][1]) if self._entries else val
        self._entries.append((val, smallest))

    def pop(self) -> T:
        """Remove and return the top element."""
        if not self._entries:
            raise IndexError("pop from empty stack")
        return self._entries.pop()[0]

    def top(self) -> T:
        """The top element, left in place."""
        if not self._entries:
            raise IndexError("top of empty stack")
        return self._entries[-1][0]

    def get_min(self) -> T:
        """The smallest element currently on the stack."""
        if not self._entries:
            raise IndexError("minimum of empty stack")
        return self._entries[-1][1]


class TwoStackQueue(Generic[T]):
    """A first-in first-out queue kept as an inbox and an outbox stack."""

    def __init__(self) -> None:
        self._inbox: list[T] = []
        self._outbox: list[T] = []

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("queue is empty")

    def push(self, x: T) -> None:
        """Add ``x`` at the back of the queue."""
        self._inbox.append(x)

    def pop(self) -> T:
        """Remove and return the element at the front."""
        self._refill()
        return self._outbox.pop()

    def peek(self) -> T:
        """The element at the front, left in place."""
        self._refill()
        return self._outbox[-1]

    def is_empty(self) -> bool:
        """Whether the queue holds no elements."""
        return not self._inbox and not self._outbox