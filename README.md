# dstructs

Plain Python implementations of the classic data structures: singly,
doubly and circular linked lists, stacks and queues (unbounded and
fixed-capacity), a fixed-capacity float vector, a first-letter name
table, a self-organising product list, and a few small helpers for
sorting, books and integer matrices. There are no dependencies beyond
the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules at a glance

| Module | What it holds |
| --- | --- |
| `dstructs.sorting` | `selection_sort`, `bubble_sort` over an inclusive sub-range, `compare_strings`, `format_int_vector` |
| `dstructs.doubly_linked` | `DoublyLinkedList`, `EmptyListError` |
| `dstructs.singly_linked` | `LinkedList` |
| `dstructs.circular` | `CircularList` |
| `dstructs.float_vector` | `FloatVector`, `VectorFullError` |
| `dstructs.stacks` | `Stack`, `StaticStack`, `StackEmptyError`, `StackFullError` |
| `dstructs.queues` | `Queue`, `StaticQueue`, `QueueEmptyError`, `QueueFullError` |
| `dstructs.hashtable` | `NameTable`, `hash_name` |
| `dstructs.invert` | `reverse_text` |
| `dstructs.frequency_list` | `FrequencyList`, `Product`, `format_product`, `run_commands` |
| `dstructs.books` | `Book`, `Student`, `create_student`, `Library`, `read_library` |
| `dstructs.matrix` | `create_int_matrix`, `fill_sequential`, `add_scalar`, `format_matrix`, `checkerboard`, `flat_index` |

Operations that need an element raise instead of returning a sentinel:
`EmptyListError`, `StackEmptyError` and `QueueEmptyError` are
`IndexError` subclasses; `StackFullError` and `QueueFullError` are
`OverflowError` subclasses. Removing a value that is not in a list
raises `ValueError`, and bad indexes raise `IndexError`.

## Examples

Linked lists behave like ordinary Python sequences where it makes sense:

```python
from dstructs.doubly_linked import DoublyLinkedList

left = DoublyLinkedList([1, 2, 3])
right = DoublyLinkedList([4, 5])
both = left.merge(right)

list(both)            # [1, 2, 3, 4, 5]
list(reversed(both))  # [5, 4, 3, 2, 1]
both.first(), both.last(), len(both)   # (1, 5, 5)
print(both.render())
```

`LinkedList` adds `add_after(index, value)`; `CircularList` links its
last node back to the first and can be walked either way.

Stacks and queues come in an unbounded and a fixed-capacity flavour.
Taking from an empty one, or adding to a full one, raises:

```python
from dstructs.stacks import StaticStack
from dstructs.queues import StaticQueue

stack = StaticStack(2)
stack.push(5)
stack.push(3)
stack.is_full()   # True
stack.pop()       # 3

queue = StaticQueue(3)
for value in (10, 20, 30):
    queue.enqueue(value)
queue.dequeue()   # 10
queue.enqueue(40) # wraps around the circular buffer
print(queue.render())
```

`FloatVector` has a fixed capacity and stores values as single-precision
floats; `at` reads stored elements, `get` reads any slot up to the
capacity.

The name table files names into one bucket per letter, A to Z, and
looks them up case-insensitively. `find` returns the bucket number, or
`None` when the name is absent:

```python
from dstructs.hashtable import NameTable

table = NameTable("Names")
for name in ("Diogo", "Diana", "Raissa"):
    table.insert(name)
table.find("diogo")               # 3
table.find("Zika")                # None
print(table.describe_find("Zika"))
print(table.render())
```

Names that do not start with an ASCII letter are rejected with
`ValueError`.

The frequency list counts how often each product is accessed and moves
frequently used products towards the front, keeping a running total of
the search cost (the 1-based position of each successful access):

```python
from dstructs.frequency_list import FrequencyList

products = FrequencyList()
products.add(1, "pen", 1.5)
products.add(2, "ink", 3.0)
products.access(2)
[product.serial for product in products]   # [2, 1]
products.total_cost()                       # 2
print(products.render_serials())
```

## Commands

Reverse a string with a stack:

```
dstructs-invert "hello world"
```

Drive a product list from standard input. Commands are `add <serial>
<name> <price>`, `acessa <serial>`, `imprime`, and `para` to stop and
print the final order and total cost. Unknown serials are reported on
standard error; accessing an empty list ends the run with exit status 1:

```
dstructs-products
```

Build an integer matrix, fill it 0, 1, 2, …, print it, add a scalar and
print it again:

```
dstructs-matrix 2 3 10
```

## What it does not do

Everything lives in memory: no structure is saved to or loaded from
disk. There is no interactive prompt for entering books; `read_library`
takes the lines to read as an argument.