"""Books, students with a favourite book, and a library of books."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class Book:
    """A book with a title, a page count and a price."""

    title: str
    pages: int
    price: float

    def same_book(self, other: Book) -> bool:
        """Return True if both books have the same title."""
        return self.title == other.title

    def render(self) -> str:
        return _render_book(self, "$")


def _render_book(book: Book, currency: str) -> str:
    return (
        f"Title: {book.title}\n"
        f"Pages: {book.pages}\n"
        f"Price: {currency}{book.price:.2f}\n"
    )


@dataclass
class Student:
    """A student with a name, an age and a favourite book."""

    name: str
    age: int
    favbook: Book

    def render(self) -> str:
        return (
            f"Name: {self.name}\n"
            f"Age: {self.age}\n"
            "Favorite book: \n"
            "---------\n"
            + self.favbook.render()
        )


def create_student(name: str, age: int, favbook: Book) -> Student:
    """Create a student holding its own copy of ``favbook``."""
    return Student(name, age, dataclasses.replace(favbook))


class Library:
    """A fixed collection of books."""

    def __init__(self, books: Iterable[Book]) -> None:
        self._books = list(books)

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._books!r})"

    def render(self) -> str:
        header = f"A biblioteca possui {len(self._books)} livro(s), sao eles:\n"
        return header + "".join(
            _render_book(book, "R$ ") + "\n" for book in self._books
        )


def read_library(size: int, lines: Iterable[str]) -> Library:
    """Read ``size`` books, each as a title, a page count and a price line."""
    if size < 0:
        raise ValueError(f"library size must not be negative, got {size}")
    source = iter(lines)

    def take(what: str, number: int) -> str:
        try:
            return next(source).rstrip("\n")
        except StopIteration:
            raise ValueError(f"missing {what} of book {number}") from None

    books = []
    for number in range(1, size + 1):
        title = take("title", number)
        pages = int(take("page count", number))
        price = float(take("price", number))
        books.append(Book(title, pages, price))
    return Library(books)