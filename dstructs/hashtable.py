"""A table of names bucketed by their first letter."""

from __future__ import annotations

from string import ascii_uppercase

from dstructs.doubly_linked import DoublyLinkedList
from dstructs.sorting import compare_strings

TABLE_SIZE = len(ascii_uppercase)


def hash_name(name: str) -> int:
    """Return the bucket of ``name``: its first letter's offset from 'A'.

    Only ASCII letters are upper-cased, so names that do not start with
    one fall outside the range 0 to 25.
    """
    if not name:
        raise ValueError("cannot hash an empty name")
    first = name[0]
    if "a" <= first <= "z":
        first = first.upper()
    return ord(first) - ord("A")


def _bucket_index(name: str) -> int:
    index = hash_name(name)
    if not 0 <= index < TABLE_SIZE:
        raise ValueError(f"'{name}' does not start with a letter from A to Z")
    return index


class NameTable:
    """A hash table of names with one chained bucket per letter."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._table = [DoublyLinkedList() for _ in range(TABLE_SIZE)]
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, size={self._size})"

    def insert(self, name: str) -> None:
        self._table[_bucket_index(name)].add_last(name)
        self._size += 1

    def find(self, name: str) -> int | None:
        """Return the bucket holding ``name`` (ignoring case), or None."""
        index = _bucket_index(name)
        if any(compare_strings(name, stored) == 0 for stored in self._table[index]):
            return index
        return None

    def describe_find(self, name: str) -> str:
        index = self.find(name)
        if index is None:
            return f"'{name}' not found on table '{self.name}'!"
        return f"'{name}' hashes to position '{index}' on table '{self.name}'!"

    def buckets(self) -> dict[str, list[str]]:
        """Return the non-empty buckets keyed by letter, in letter order."""
        return {
            letter: list(bucket)
            for letter, bucket in zip(ascii_uppercase, self._table)
            if not bucket.is_empty()
        }

    def render(self) -> str:
        return "".join(
            f"Letter [{letter}]:\n" + "".join(f"- {name}\n" for name in names)
            for letter, names in self.buckets().items()
        )