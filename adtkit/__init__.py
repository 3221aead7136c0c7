"""Vector, linked list, hash map, priority queue and integer vector, with small programs built on them."""

__version__ = "0.1.0"