"""Classic algorithms and data structures: bit operations, ciphers, containers,
dynamic programming, graph search, sorting and string matching."""

__version__ = "0.1.0"

__all__ = [
    "bits",
    "ciphers",
    "containers",
    "distribution_sort",
    "graphs",
    "kmp",
    "linked_list",
    "nqueens",
    "optimization",
    "sequences",
    "sorting",
]