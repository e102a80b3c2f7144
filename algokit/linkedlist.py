"""A singly linked list of values."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    value: Any
    next: "_Node | None" = None


class LinkedList:
    """Singly linked list that appends at the tail."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._length = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Append ``value`` at the end."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def count(self, value: Any) -> int:
        """Number of elements equal to ``value``."""
        return sum(1 for item in self if item == value)

    def delete(self, value: Any) -> int:
        """Remove every element equal to ``value``; return how many were removed."""
        removed = 0
        previous: _Node | None = None
        node = self._head
        while node is not None:
            if node.value == value:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                removed += 1
            else:
                previous = node
            node = node.next
        self._tail = previous
        self._length -= removed
        return removed

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"