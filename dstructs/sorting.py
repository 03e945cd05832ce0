"""Simple in-place sorting routines and small vector/string helpers."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def format_int_vector(values: Sequence[int]) -> str:
    """Render integers as ``"a -> b -> "`` followed by a newline.

    An empty sequence renders as an empty string.
    """
    rendered = "".join(f"{value} -> " for value in values)
    return f"{rendered}\n" if rendered else ""


def _check_range(values: Sequence[int], left: int, right: int) -> None:
    if left <= right and (left < 0 or right >= len(values)):
        raise IndexError(
            f"range [{left}, {right}] is out of bounds for a sequence of length {len(values)}"
        )


def selection_sort(values: MutableSequence[int], left: int, right: int) -> None:
    """Sort ``values[left..right]`` (inclusive) in place by selection sort."""
    _check_range(values, left, right)
    for i in range(left, right + 1):
        smallest = min(range(i, right + 1), key=values.__getitem__)
        if values[i] != values[smallest]:
            values[i], values[smallest] = values[smallest], values[i]


def bubble_sort(values: MutableSequence[int], left: int, right: int) -> None:
    """Sort ``values[left..right]`` (inclusive) in place by bubble sort."""
    _check_range(values, left, right)
    for i in range(left, right + 1):
        for j in range(right, i, -1):
            if values[j] < values[j - 1]:
                values[j], values[j - 1] = values[j - 1], values[j]


def compare_strings(text1: str, text2: str) -> int:
    """Return 0 if the strings match ignoring case, otherwise 1."""
    folded1 = "".join(char.lower() for char in text1)
    folded2 = "".join(char.lower() for char in text2)
    if folded1 == folded2:
        return 0
    return 1