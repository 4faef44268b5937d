"""A doubly linked list with optional matching and printing callbacks."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False, repr=False)
class Node:
    """One element of a :class:`LinkedList`."""

    data: Any
    owner: LinkedList | None = field(default=None)
    next: Node | None = field(default=None)
    prev: Node | None = field(default=None)

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


class LinkedList:
    """A doubly linked list.

    ``match(a, b)`` decides whether two elements are equal (defaults to ``==``);
    ``printer(data)`` is called for each element by :meth:`print`.
    """

    def __init__(
        self,
        match: Callable[[Any, Any], bool] | None = None,
        printer: Callable[[Any], None] | None = None,
    ) -> None:
        self.match = match if match is not None else operator.eq
        self.printer = printer
        self.head: Node | None = None
        self.tail: Node | None = None
        self._size = 0

    def _check_owner(self, node: Node) -> None:
        if node is None or node.owner is not self:
            raise ValueError("node does not belong to this list")

    def insert_head(self, data: Any) -> Node:
        """Insert ``data`` at the front and return its node."""
        node = Node(data, self, next=self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node
        self._size += 1
        return node

    def insert_tail(self, data: Any) -> Node:
        """Insert ``data`` at the back and return its node."""
        node = Node(data, self, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1
        return node

    def _unlink(self, node: Node) -> Any:
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev
        node.owner = node.next = node.prev = None
        self._size -= 1
        return node.data

    def remove_head(self) -> Any:
        """Remove the first element and return its data."""
        if self.head is None:
            raise IndexError("remove from an empty list")
        return self._unlink(self.head)

    def remove_tail(self) -> Any:
        """Remove the last element and return its data."""
        if self.tail is None:
            raise IndexError("remove from an empty list")
        return self._unlink(self.tail)

    def find(self, data: Any) -> Node | None:
        """Return the first node whose data matches ``data``, or None."""
        node = self.head
        while node is not None:
            if self.match(node.data, data):
                return node
            node = node.next
        return None

    def insert_after(self, node: Node, data: Any) -> Node:
        """Insert ``data`` directly after ``node`` and return the new node."""
        self._check_owner(node)
        if node is self.tail:
            return self.insert_tail(data)
        new = Node(data, self, next=node.next, prev=node)
        node.next.prev = new
        node.next = new
        self._size += 1
        return new

    def insert_before(self, node: Node, data: Any) -> Node:
        """Insert ``data`` directly before ``node`` and return the new node."""
        self._check_owner(node)
        if node is self.head:
            return self.insert_head(data)
        new = Node(data, self, next=node, prev=node.prev)
        node.prev.next = new
        node.prev = new
        self._size += 1
        return new

    def print(self) -> None:
        """Pass each element, front to back, to the printer if one is set."""
        if self.printer is None:
            return
        for data in self:
            self.printer(data)

    def print_backward(self) -> None:
        """Pass each element, back to front, to the printer if one is set."""
        if self.printer is None:
            return
        for data in reversed(self):
            self.printer(data)

    def clear(self) -> None:
        """Remove every element."""
        while self.head is not None:
            self._unlink(self.head)

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size