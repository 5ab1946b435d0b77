"""A singly linked list with in-place reversal and loop handling."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, eq=False)
class _Node:
    value: Any
    next: _Node | None = None


class LinkedList:
    """Singly linked list of values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        tail: _Node | None = None
        for value in values:
            node = _Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node

    def insert_front(self, value: Any) -> None:
        """Put ``value`` before the first node."""
        self._head = _Node(value, self._head)

    def insert_at(self, index: int, value: Any) -> None:
        """Insert ``value`` so it ends up at position ``index`` (0 to length)."""
        if index < 0:
            raise IndexError("index must not be negative")
        if index == 0:
            self.insert_front(value)
            return
        prev = self._node_at(index - 1)
        prev.next = _Node(value, prev.next)

    def delete_at(self, index: int) -> None:
        """Remove the node at position ``index``."""
        if index < 0:
            raise IndexError("index must not be negative")
        if index == 0:
            if self._head is None:
                raise IndexError("delete from empty list")
            self._head = self._head.next
            return
        prev = self._node_at(index - 1)
        if prev.next is None:
            raise IndexError("index out of range")
        prev.next = prev.next.next

    def reverse(self) -> None:
        """Reverse the list in place, iteratively."""
        self._require_no_loop()
        done: _Node | None = None
        node = self._head
        while node is not None:
            following = node.next
            node.next = done
            done = node
            node = following
        self._head = done

    def reverse_recursive(self) -> None:
        """Reverse the list in place, recursively."""
        self._require_no_loop()

        def flip(node: _Node | None, prev: _Node | None) -> _Node | None:
            if node is None:
                return prev
            head = flip(node.next, node)
            node.next = prev
            return head

        self._head = flip(self._head, None)

    def make_loop(self, pos: int) -> None:
        """Point the last node back to the node at 1-based position ``pos``."""
        if pos < 1:
            raise IndexError("position starts at 1")
        self._require_no_loop()
        target = self._node_at(pos - 1)
        last = target
        while last.next is not None:
            last = last.next
        last.next = target

    def has_loop(self) -> bool:
        """Whether following the links ever returns to an earlier node."""
        return self._meeting_point() is not None

    def remove_loop(self) -> bool:
        """Break a loop if there is one; returns whether a loop was removed."""
        meet = self._meeting_point()
        if meet is None:
            return False
        walker = self._head
        assert walker is not None
        if walker is meet:
            # The loop starts at the head: find the node that links back to it.
            while meet.next is not walker:
                meet = meet.next
        else:
            while walker.next is not meet.next:
                walker = walker.next
                meet = meet.next
        meet.next = None
        return True

    def __iter__(self) -> Iterator[Any]:
        self._require_no_loop()
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            if node is None:
                break
            node = node.next
        if node is None:
            raise IndexError("index out of range")
        return node

    def _meeting_point(self) -> _Node | None:
        slow = fast = self._head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                return slow
        return None

    def _require_no_loop(self) -> None:
        if self.has_loop():
            raise ValueError("list contains a loop")