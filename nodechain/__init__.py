"""Algorithms on singly linked lists: nodes, traversal, reordering and removal."""

__version__ = "0.1.0"
__all__ = ["node", "traversal", "reorder", "removal"]