"""Queues: one unbounded and one circular with a fixed capacity."""

from __future__ import annotations

from typing import Any

from dstructs.doubly_linked import DoublyLinkedList, _Container
from dstructs.float_vector import _Bounded, _lines_block


class QueueEmptyError(IndexError):
    """Raised when reading from or dequeuing an empty queue."""


class QueueFullError(OverflowError):
    """Raised when enqueuing onto a queue that has reached its capacity."""


class _QueueBase(_Container):
    _empty_error = QueueEmptyError
    _empty_message = "the queue is empty"


class Queue(_QueueBase):
    """An unbounded FIFO queue kept in a doubly linked list."""

    def __init__(self) -> None:
        self._data = DoublyLinkedList()

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._data)!r})"

    def is_empty(self) -> bool:
        return self._data.is_empty()

    def enqueue(self, value: Any) -> None:
        self._data.add_last(value)

    def peek(self) -> Any:
        self._require_items("peek")
        return self._data.first()

    def dequeue(self) -> Any:
        self._require_items("dequeue")
        return self._data.remove_first()

    def render(self) -> str:
        self._require_items("render")
        header = _lines_block(
            [
                "===============",
                f"Size: {len(self)}",
                f"First: {self.peek()}",
                "---------------",
            ]
        )
        return header + self._data.render()


class StaticQueue(_QueueBase, _Bounded):
    """A circular FIFO queue that holds at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)
        self._slots: list[Any] = [0] * capacity
        self._size = 0
        self._begin = 0
        self._end = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self._capacity

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            raise QueueFullError("enqueue: full queue")
        self._slots[self._end] = value
        self._end = (self._end + 1) % self._capacity
        self._size += 1

    def peek(self) -> Any:
        self._require_items("peek")
        return self._slots[self._begin]

    def dequeue(self) -> Any:
        value = self.peek()
        self._begin = (self._begin + 1) % self._capacity
        self._size -= 1
        return value

    def render(self) -> str:
        self._require_items("render")
        positions = ((self._begin + k) % self._capacity for k in range(self._size))
        return _lines_block(
            [
                "===================",
                f"Capacity: {self._capacity}",
                f"Size: {self._size}",
                f"Begin: {self._begin}",
                f"End: {self._end}",
                "-----------------",
                *(f"data[{i}] = '{self._slots[i]}'" for i in positions),
                "===================",
            ]
        )