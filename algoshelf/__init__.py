"""Classic algorithms: graphs, arrays, numbers, text patterns and a binary search tree."""

__version__ = "0.1.0"
__all__ = ["arrays", "bst", "graphs", "numbers", "patterns"]