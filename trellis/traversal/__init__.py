"""Traversal engine: depth-first and breadth-first walks."""

from .breadth_first import iter_breadth_first, traverse_breadth_first
from .depth_first import iter_depth_first, traverse_depth_first

__all__ = [
    "iter_breadth_first",
    "traverse_breadth_first",
    "iter_depth_first",
    "traverse_depth_first",
]
