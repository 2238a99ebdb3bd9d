"""Reachability search."""

from .reachability import breadth_first_search, find_node, reachable_names

__all__ = [
    "breadth_first_search",
    "find_node",
    "reachable_names",
]
