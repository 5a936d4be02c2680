"""Classic algorithms on binary trees, linked lists, arrays and strings."""

__version__ = "0.1.0"
__all__ = ["arrays", "counting", "linked_lists", "text", "trees"]