"""Classic data structures and algorithms in plain Python: trees, queues,
linked lists, graphs, hashing, tries, fractions and assorted algorithms."""

__version__ = "0.1.0"