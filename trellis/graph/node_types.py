"""Constants and enum definitions for the weighted graph."""

from enum import Enum

# Edge weights are small non-negative integers.
MIN_WEIGHT = 0
MAX_WEIGHT = 255


class TraversalSignal(str, Enum):
    """Returned by a breadth-first visitor to continue or abort the walk."""

    CONTINUE = "continue"
    STOP = "stop"


class Mark(str, Enum):
    """Topological sort marks for a node."""

    TEMPORARY = "temporary"  # On the active path
    PERMANENT = "permanent"  # Fully processed
