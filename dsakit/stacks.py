"""Bounded and unbounded stacks, plus bracket matching and infix-to-postfix."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_OPENERS = {")": "(", "]": "[", "}": "{"}
_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}


class StackOverflowError(IndexError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when reading from an empty stack."""


class ArrayStack:
    """A stack that holds at most ``size`` items."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.capacity = size
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top; raises StackOverflowError when full."""
        if self.is_full():
            raise StackOverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def __len__(self) -> int:
        return len(self._items)


@dataclass(slots=True)
class _Node:
    value: Any
    next: _Node | None


class LinkedStack:
    """An unbounded stack kept as a chain of nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None

    def push(self, value: Any) -> None:
        self._top = _Node(value, self._top)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self._top is None:
            raise StackUnderflowError("stack underflow")
        value = self._top.value
        self._top = self._top.next
        return value

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self._top is None:
            raise StackUnderflowError("stack underflow")
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None


def is_balanced(text: str) -> bool:
    """Whether every (), [] and {} in ``text`` is properly matched and nested."""
    open_brackets: list[str] = []
    for ch in text:
        if ch in "([{":
            open_brackets.append(ch)
        elif ch in _OPENERS:
            if not open_brackets or open_brackets[-1] != _OPENERS[ch]:
                return False
            open_brackets.pop()
    return not open_brackets


def precedence(op: str) -> int:
    """Binding strength of an arithmetic operator; 0 for anything else."""
    return _PRECEDENCE.get(op, 0)


def infix_to_postfix(expression: str) -> str:
    """Reorder ``+ - * /`` into postfix; every other character is copied as it comes."""
    pending: list[str] = []
    output: list[str] = []
    for ch in expression:
        if ch in _PRECEDENCE:
            while pending and precedence(pending[-1]) >= precedence(ch):
                output.append(pending.pop())
            pending.append(ch)
        else:
            output.append(ch)
    output.extend(reversed(pending))
    return "".join(output)