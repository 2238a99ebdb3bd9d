"""Shortest path costs."""

from .dijkstra import UNREACHABLE, dijkstra

__all__ = [
    "UNREACHABLE",
    "dijkstra",
]
