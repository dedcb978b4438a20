"""Classic data structures and algorithms for study: arrays, recursion, graphs, heaps, hash tables and queues."""

__version__ = "0.1.0"