"""Schema layer for validating declarative graph definitions."""

from .models import EdgeDefinition, GraphDefinition, NodeDefinition
from .loader import parse_definition

__all__ = [
    "EdgeDefinition",
    "GraphDefinition",
    "NodeDefinition",
    "parse_definition",
]
