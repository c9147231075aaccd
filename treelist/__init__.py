"""Linked list of character binary search trees with a terminal viewer."""

__version__ = "0.1.0"
__all__ = ["__version__"]