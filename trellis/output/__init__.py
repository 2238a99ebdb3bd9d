"""Example visitors for inspecting graphs."""

from .formatter import format_node, log_edge, log_node

__all__ = [
    "format_node",
    "log_edge",
    "log_node",
]
