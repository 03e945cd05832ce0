"""A singly linked list that keeps direct access to its last node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from dstructs.doubly_linked import _LinkedBase


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node | None = None


class LinkedList(_LinkedBase):
    """A list whose nodes link only to their successor."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._begin: _Node | None = None
        self._end: _Node | None = None
        self._size = 0
        for value in values:
            self.add_last(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def is_empty(self) -> bool:
        return self._size == 0

    def add_first(self, value: Any) -> None:
        node = _Node(value)
        if self._begin is None:
            self._begin = self._end = node
        else:
            node.next = self._begin
            self._begin = node
        self._size += 1

    def add_last(self, value: Any) -> None:
        if self._end is None:
            self.add_first(value)
            return
        node = _Node(value)
        self._end.next = node
        self._end = node
        self._size += 1

    def add_after(self, index: int, value: Any) -> None:
        """Insert ``value`` after the node at ``index``.

        An index of 0 inserts at the head of the list.
        """
        self._require_items("add_after")
        self._check_index(index, "add_after")
        if index == 0:
            self.add_first(value)
            return
        anchor = self._node_at(index)
        node = _Node(value)
        node.next = anchor.next
        anchor.next = node
        if anchor is self._end:
            self._end = node
        self._size += 1

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        self._require_items("remove")
        previous: _Node | None = None
        for node in self._nodes():
            if node.value == value:
                if previous is None:
                    self._begin = node.next
                else:
                    previous.next = node.next
                if node is self._end:
                    self._end = previous
                node.next = None
                self._size -= 1
                return
            previous = node
        raise ValueError(f"The element {value} wasn't found to be removed.")

    def first(self) -> Any:
        self._require_items("first")
        return self._begin.value  # type: ignore[union-attr]

    def last(self) -> Any:
        self._require_items("last")
        return self._end.value  # type: ignore[union-attr]

    def get(self, index: int) -> Any:
        self._require_items("get")
        self._check_index(index, "get")
        return self._node_at(index).value

    def copy(self) -> LinkedList:
        self._require_items("copy")
        return type(self)(self)

    def render(self) -> str:
        if self.is_empty():
            return "L -> NULL\nLast element = NULL\n"
        return (
            f"Size: {self._size}\n"
            f"L -> {self._chain(self)}NULL\n"
            f"\nLast element = {self._end.value}\n"  # type: ignore[union-attr]
        )