"""Integer matrices as lists of rows, and the row-major flat layout."""

from __future__ import annotations

import sys


def create_int_matrix(nrows: int, ncols: int) -> list[list[int]]:
    """Return an ``nrows`` by ``ncols`` matrix of zeros with independent rows."""
    if nrows < 0 or ncols < 0:
        raise ValueError(f"matrix dimensions must not be negative: {nrows}x{ncols}")
    return [[0] * ncols for _ in range(nrows)]


def fill_sequential(matrix: list[list[int]]) -> None:
    """Fill the matrix in place with 0, 1, 2, ... in row-major order."""
    count = 0
    for row in matrix:
        for j in range(len(row)):
            row[j] = count
            count += 1


def add_scalar(matrix: list[list[int]], scalar: int) -> None:
    """Add ``scalar`` to every element of the matrix in place."""
    for row in matrix:
        row[:] = [value + scalar for value in row]


def format_matrix(matrix: list[list[int]]) -> str:
    """Render each element as ``m[i][j] = v``, with a blank line after each row."""
    return "".join(
        "".join(f"m[{i}][{j}] = {value}\n" for j, value in enumerate(row)) + "\n"
        for i, row in enumerate(matrix)
    )


def checkerboard(nrows: int, ncols: int) -> list[list[int]]:
    """Return a matrix of alternating 0 and 1, starting with 0 at the corner."""
    if nrows < 0 or ncols < 0:
        raise ValueError(f"matrix dimensions must not be negative: {nrows}x{ncols}")
    return [[(i + j) % 2 for j in range(ncols)] for i in range(nrows)]


def flat_index(row: int, col: int, ncols: int) -> int:
    """Return the row-major position of ``[row][col]`` in a flat array."""
    if row < 0 or not 0 <= col < ncols:
        raise IndexError(f"position [{row}][{col}] is outside a row of {ncols} columns")
    return row * ncols + col


def main(argv: list[str] | None = None) -> int:
    """Build a sequential matrix, print it, add a scalar and print it again."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 3:
        print("ERROR\nmatrix nrow ncols scalar")
        return 1
    try:
        nrows, ncols, scalar = (int(arg) for arg in args)
        matrix = create_int_matrix(nrows, ncols)
    except ValueError as error:
        print(f"ERROR\n{error}")
        return 1

    fill_sequential(matrix)
    print(format_matrix(matrix), end="")
    add_scalar(matrix, scalar)
    print(format_matrix(matrix), end="")
    print("m is NULL? 1")
    return 0


if __name__ == "__main__":
    sys.exit(main())