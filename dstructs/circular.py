"""A circular doubly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from dstructs.doubly_linked import _BidirectionalBase, _Node


class _RingNode(_Node):
    __slots__ = ()

    def __init__(self, value: Any) -> None:
        super().__init__(value)
        self.next = self.prev = self


class CircularList(_BidirectionalBase):
    """A doubly linked list whose last node links back to the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._begin: _RingNode | None = None
        self._end: _RingNode | None = None
        self._size = 0
        for value in values:
            self.add_last(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        return self._values_backward()

    def is_empty(self) -> bool:
        return self._size == 0

    def add_first(self, value: Any) -> None:
        node = _RingNode(value)
        if self.is_empty():
            self._end = node
        else:
            node.next = self._begin
            self._begin.prev = node  # type: ignore[union-attr]
            node.prev = self._end
            self._end.next = node  # type: ignore[union-attr]
        self._begin = node
        self._size += 1

    def add_last(self, value: Any) -> None:
        if self.is_empty():
            self.add_first(value)
            return
        self.add_first(value)
        # The new head sits between the old end and the old head: rotate it to the end.
        self._end = self._begin
        self._begin = self._begin.next  # type: ignore[union-attr,assignment]

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        self._require_items("remove")
        for node in self._nodes():
            if node.value != value:
                continue
            if self._size == 1:
                self._begin = self._end = None
            else:
                node.prev.next = node.next
                node.next.prev = node.prev
                if node is self._begin:
                    self._begin = node.next
                if node is self._end:
                    self._end = node.prev
            node.next = node.prev = node
            self._size -= 1
            return
        raise ValueError(f"It wasn't possible to find the element '{value}' in the list.")

    def first(self) -> Any:
        self._require_items("first")
        return self._begin.value  # type: ignore[union-attr]

    def last(self) -> Any:
        self._require_items("last")
        return self._end.value  # type: ignore[union-attr]

    def render(self) -> str:
        self._require_items("render")
        return "L -> " + " -> ".join(map(str, self)) + "\n"

    def render_reversed(self) -> str:
        self._require_items("render_reversed")
        return "L -> " + " -> ".join(map(str, reversed(self))) + "\n"