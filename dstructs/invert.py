"""Reverse a string by pushing its characters onto a stack."""

from __future__ import annotations

import sys

from dstructs.stacks import Stack


def reverse_text(text: str) -> str:
    """Return ``text`` reversed, character by character, via a stack."""
    stack = Stack()
    for char in text:
        stack.push(char)
    return "".join(stack.pop() for _ in text)


def main(argv: list[str] | None = None) -> int:
    """Print the reverse of the single string argument."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: invert [string]")
        return 1

    text = args[0]
    stack = Stack()
    for char in text:
        stack.push(char)

    print(f"First size: {len(stack)}")
    print("'invert' == NULL? 0")
    reversed_text = "".join(stack.pop() for _ in text)
    print(f"the inverse of '{text}' is: {reversed_text}")
    print(f"Last size: {len(stack)}")
    print("'invert' == NULL? 1")
    return 0


if __name__ == "__main__":
    sys.exit(main())