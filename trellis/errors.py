"""Graph-related exceptions."""


class GraphError(Exception):
    """Base exception for all graph errors."""

    pass


class DuplicateNodeError(GraphError):
    """Raised when a node name is already taken in the graph."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Node '{name}' already exists")


class UnknownNodeError(GraphError, KeyError):
    """Raised when a node name does not exist in the graph."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Node '{name}' does not exist")

    def __str__(self) -> str:
        return self.args[0]


class ForeignNodeError(GraphError):
    """Raised when an edge would connect nodes of two different graphs."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Node '{name}' belongs to another graph")


class InvalidWeightError(GraphError, ValueError):
    """Raised when an edge weight is outside the allowed range."""

    def __init__(self, message: str, weight: object = None):
        self.weight = weight
        super().__init__(message)


class CycleError(GraphError):
    """Raised when a topological sort reaches a node already on its active path.

    Attributes:
        node: Name of the node that was entered twice.
        path: Names along the active path, starting and ending at ``node``.
    """

    def __init__(self, node: str, path: list[str] | None = None):
        self.node = node
        self.path = path or [node]
        super().__init__(f"Not a DAG: cycle detected at node '{node}' ({' -> '.join(self.path)})")


class DefinitionError(GraphError):
    """Raised when a graph definition fails validation."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)
