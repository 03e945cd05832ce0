"""Classic data structures: linked lists, stacks, queues, a name table and small utilities."""

__version__ = "0.1.0"