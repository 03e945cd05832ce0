"""Stacks: one unbounded and one with a fixed capacity."""

from __future__ import annotations

from typing import Any

from dstructs.doubly_linked import DoublyLinkedList, _Container
from dstructs.float_vector import _Bounded, _lines_block


class StackEmptyError(IndexError):
    """Raised when reading from or popping an empty stack."""


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that has reached its capacity."""


class _StackBase(_Container):
    _empty_error = StackEmptyError
    _empty_message = "the stack is empty"


class Stack(_StackBase):
    """An unbounded LIFO stack kept in a doubly linked list."""

    def __init__(self) -> None:
        self._data = DoublyLinkedList()

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._data)!r})"

    def is_empty(self) -> bool:
        return self._data.is_empty()

    def push(self, value: Any) -> None:
        self._data.add_last(value)

    def peek(self) -> Any:
        self._require_items("peek")
        return self._data.last()

    def pop(self) -> Any:
        self._require_items("pop")
        return self._data.remove_last()

    def render(self) -> str:
        self._require_items("render")
        return self._data.render()


class StaticStack(_StackBase, _Bounded):
    """A LIFO stack that holds at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)
        self._data: list[Any] = []

    def __len__(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data

    def is_full(self) -> bool:
        return len(self._data) == self._capacity

    def push(self, value: Any) -> None:
        if self.is_full():
            raise StackFullError(
                f"The stack is full! Size (max): {len(self)} ({self._capacity})"
            )
        self._data.append(value)

    def peek(self) -> Any:
        self._require_items("peek")
        return self._data[-1]

    def pop(self) -> Any:
        self._require_items("pop")
        return self._data.pop()

    def render(self) -> str:
        self._require_items("render")
        return _lines_block(
            [
                "===================",
                f"Capacity: {self._capacity}",
                f"Size: {len(self)}",
                f"Top: {len(self) - 1}",
                "-----------------",
                *(f"data[{i}] = '{value}'" for i, value in enumerate(self._data)),
                "===================",
            ]
        )