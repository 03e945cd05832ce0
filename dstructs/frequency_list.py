"""A self-organising list of products ordered by how often they are accessed."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from dstructs.doubly_linked import EmptyListError


@dataclass(frozen=True)
class Product:
    """A product with a serial number, a name and a price."""

    serial: int
    name: str
    price: float


def format_product(product: Product) -> str:
    """Render a product as a small block surrounded by blank lines."""
    return (
        "\n"
        f"* Product name: {product.name}\n"
        f"* Product serial: {product.serial:03d}\n"
        f"* Product price: {product.price:.2f}\n"
        "\n"
    )


@dataclass
class _Entry:
    product: Product
    count: int = 0


class FrequencyList:
    """A list that moves each accessed product ahead of less-accessed ones.

    Every successful access adds the product's 1-based position to the
    running total cost, then moves it in front of every preceding product
    whose access count is lower than or equal to its own.
    """

    def __init__(self) -> None:
        self._entries: list[_Entry] = []
        self._total_cost = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Product]:
        return (entry.product for entry in self._entries)

    def __repr__(self) -> str:
        serials = [entry.product.serial for entry in self._entries]
        return f"{type(self).__name__}({serials!r}, total_cost={self._total_cost})"

    def is_empty(self) -> bool:
        return not self._entries

    def add(self, serial: int, name: str, price: float) -> None:
        """Append a new product to the end of the list."""
        self._entries.append(_Entry(Product(serial, name, price)))

    def access(self, serial: int) -> Product | None:
        """Return the product with ``serial`` and reorganise the list.

        Returns None when no product has that serial.
        """
        if self.is_empty():
            raise EmptyListError("access: list is empty")
        for position, entry in enumerate(self._entries):
            if entry.product.serial == serial:
                break
        else:
            return None

        self._total_cost += position + 1
        entry.count += 1

        target = position
        while target > 0 and self._entries[target - 1].count <= entry.count:
            target -= 1
        if target != position:
            del self._entries[position]
            self._entries.insert(target, entry)
        return entry.product

    def total_cost(self) -> int:
        """Return the sum of the positions of every successful access."""
        return self._total_cost

    def render(self) -> str:
        body = "".join(
            f"{entry.product.serial} ({entry.count}) -> " for entry in self._entries
        )
        return f"Serials (count): \n\nL -> {body}NULL\n"

    def render_serials(self) -> str:
        serials = ", ".join(str(entry.product.serial) for entry in self._entries)
        return f"L = ({serials})\nTotal cost: = {self._total_cost}\n"


def _take(tokens: Iterator[str], what: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError(f"unexpected end of input: expected {what}") from None


def run_commands(lines: Iterable[str]) -> str:
    """Run the ``add``/``imprime``/``acessa``/``para`` command language.

    Returns the text written to standard output; lookup failures are
    reported on standard error.
    """
    tokens = iter([token for line in lines for token in line.split()])
    products = FrequencyList()
    output = ["Command: \n"]

    for command in tokens:
        if command == "para":
            break
        if command == "add":
            serial = int(_take(tokens, "a serial"))
            name = _take(tokens, "a name")
            price = float(_take(tokens, "a price"))
            products.add(serial, name, price)
        elif command == "imprime":
            output.append(products.render())
        elif command == "acessa":
            serial = int(_take(tokens, "a serial"))
            found = products.access(serial)
            if found is not None:
                output.append(format_product(found))
            else:
                print("ERROR in 'access'", file=sys.stderr)
                print(
                    f"Product with serial '{serial:03d}' wasn't found.",
                    file=sys.stderr,
                )
        output.append("Command: \n")

    output.append(products.render_serials())
    output.append("L == NULL? 1\n")
    return "".join(output)


def main(argv: list[str] | None = None) -> int:
    """Read commands from standard input and print the results."""
    try:
        output = run_commands(sys.stdin.read().splitlines())
    except EmptyListError as error:
        print(f"ERROR in 'access'\n{error}", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"ERROR: {error}", file=sys.stderr)
        return 1
    print(output, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())