"""A doubly linked list of values, and the helpers shared by the linked containers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice
from typing import Any


class EmptyListError(IndexError):
    """Raised when an operation needs a non-empty list."""


class _Container:
    """Emptiness checks shared by every container in the package."""

    _empty_error: type[Exception] = EmptyListError
    _empty_message = "list is empty"

    def _require_items(self, operation: str) -> None:
        if len(self) == 0:  # type: ignore[arg-type]
            raise self._empty_error(f"{operation}: {self._empty_message}")


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: _Node | None = None
        self.next: _Node | None = None


class _LinkedBase(_Container):
    """Traversal helpers shared by the linked lists."""

    _begin: Any
    _end: Any
    _size: int

    def _nodes(self) -> Iterator[Any]:
        node = self._begin
        for _ in range(self._size):
            yield node
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"  # type: ignore[call-overload]

    @staticmethod
    def _chain(values: Iterable[Any]) -> str:
        return "".join(f"{value} -> " for value in values)

    def _check_index(self, index: int, operation: str) -> None:
        if not 0 <= index < self._size:
            raise IndexError(
                f"{operation}: invalid index {index}, "
                f"the index must be in this interval: [0, {self._size - 1}]"
            )

    def _node_at(self, index: int) -> Any:
        return next(islice(self._nodes(), index, None))


class _BidirectionalBase(_LinkedBase):
    """Backward traversal for lists whose nodes link to their predecessor."""

    def _values_backward(self) -> Iterator[Any]:
        node = self._end
        for _ in range(self._size):
            yield node.value
            node = node.prev


class DoublyLinkedList(_BidirectionalBase):
    """A list whose nodes link both to their successor and predecessor."""

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

    def __reversed__(self) -> Iterator[Any]:
        return self._values_backward()

    def is_empty(self) -> bool:
        return self._size == 0

    def add_first(self, value: Any) -> None:
        node = _Node(value)
        if self._begin is None:
            self._begin = self._end = node
        else:
            node.next = self._begin
            self._begin.prev = node
            self._begin = node
        self._size += 1

    def add_last(self, value: Any) -> None:
        if self._end is None:
            self.add_first(value)
            return
        node = _Node(value)
        self._end.next = node
        node.prev = self._end
        self._end = node
        self._size += 1

    def first(self) -> Any:
        self._require_items("first")
        return self._begin.value  # type: ignore[union-attr]

    def last(self) -> Any:
        self._require_items("last")
        return self._end.value  # type: ignore[union-attr]

    def _unlink(self, node: _Node) -> Any:
        if node.prev is None:
            self._begin = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._end = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.value

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        self._require_items("remove")
        for node in self._nodes():
            if node.value == value:
                self._unlink(node)
                return
        raise ValueError(f"It wasn't possible to find the element '{value}' in the list.")

    def remove_first(self) -> Any:
        self._require_items("remove_first")
        return self._unlink(self._begin)  # type: ignore[arg-type]

    def remove_last(self) -> Any:
        self._require_items("remove_last")
        return self._unlink(self._end)  # type: ignore[arg-type]

    def get(self, index: int) -> Any:
        self._require_items("get")
        self._check_index(index, "get")
        return self._node_at(index).value

    def copy(self) -> DoublyLinkedList:
        self._require_items("copy")
        return type(self)(self)

    def merge(self, other: DoublyLinkedList) -> DoublyLinkedList:
        """Return a new list holding this list's values followed by ``other``'s."""
        if self.is_empty() or other.is_empty():
            raise EmptyListError("merge: one of the lists is empty")
        merged = type(self)(self)
        for value in other:
            merged.add_last(value)
        return merged

    def render(self) -> str:
        self._require_items("render")
        return f"L -> {self._chain(self)}NULL\n--------------\n"

    def render_reversed(self) -> str:
        self._require_items("render_reversed")
        return f"L -> {self._chain(reversed(self))}NULL\n"