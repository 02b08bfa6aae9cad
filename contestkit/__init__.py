"""Classic algorithms and data structures: sorting, searching, geometry, arithmetic,
dynamic programming, greedy methods, strings, range queries and graphs."""

__version__ = "0.1.0"