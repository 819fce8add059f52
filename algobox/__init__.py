"""Classic algorithms and data structures: sorting, searching, backtracking,
dynamic programming, graphs, linked lists and a Bloom filter."""

__version__ = "0.1.0"

__all__ = [
    "backtracking",
    "bloom",
    "graphs",
    "knapsack",
    "linkedlist",
    "numbers",
    "searching",
    "sorting",
    "strings",
    "weighted",
]