"""Topological ordering."""

from .topological import topological_sort, topological_sort_graph

__all__ = [
    "topological_sort",
    "topological_sort_graph",
]
