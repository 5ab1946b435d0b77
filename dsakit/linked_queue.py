"""A FIFO queue kept as a chain of nodes with O(1) enqueue and dequeue."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class QueueUnderflowError(IndexError):
    """Raised when reading from an empty queue."""


@dataclass(slots=True)
class _Node:
    value: Any
    next: _Node | None = None


class LinkedQueue:
    """First-in, first-out queue."""

    def __init__(self) -> None:
        self._front: _Node | None = None
        self._back: _Node | None = None

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back."""
        node = _Node(value)
        if self._back is None:
            self._front = self._back = node
        else:
            self._back.next = node
            self._back = node

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if self._front is None:
            raise QueueUnderflowError("queue underflow")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._back = None
        return node.value

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if self._front is None:
            raise QueueUnderflowError("queue is empty")
        return self._front.value

    def is_empty(self) -> bool:
        return self._front is None