"""A fixed-capacity vector of single-precision floats."""

from __future__ import annotations

import struct
from collections.abc import Iterable


class VectorFullError(Exception):
    """Raised when appending to a vector that has reached its capacity."""


def _to_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _lines_block(lines: Iterable[str]) -> str:
    return "\n".join(lines) + "\n"


class _Bounded:
    """Capacity handling shared by the fixed-size containers."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self)}, capacity={self._capacity})"  # type: ignore[arg-type]


class FloatVector(_Bounded):
    """A vector with a fixed capacity whose unused slots hold 0.0."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)
        self._size = 0
        self._data = [0.0] * capacity

    def __len__(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, value: float) -> None:
        if self._size == self._capacity:
            raise VectorFullError("Vector is full!")
        self._data[self._size] = _to_float32(value)
        self._size += 1

    @staticmethod
    def _check_index(index: int, limit: int, operation: str) -> None:
        if not 0 <= index < limit:
            raise IndexError(f"{operation}: index [{index}] is out of bounds: [0, {limit}]")

    def at(self, index: int) -> float:
        """Return the stored element at ``index``, which must be below the size."""
        self._check_index(index, self._size, "at")
        return self._data[index]

    def get(self, index: int) -> float:
        """Return any slot up to the capacity, including unused ones."""
        self._check_index(index, self._capacity, "get")
        return self._data[index]

    def set(self, index: int, value: float) -> None:
        self._check_index(index, self._size, "set")
        self._data[index] = _to_float32(value)

    def render(self) -> str:
        return _lines_block(
            [
                "========================",
                f"Size: {self._size}",
                f"Capacity: {self._capacity}",
                "-----------",
                *(f"[{i}] = {value:.2f}" for i, value in enumerate(self._data)),
                "========================",
            ]
        )