"""Pydantic models for declarative graph definitions."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from ..graph.node_types import MAX_WEIGHT, MIN_WEIGHT


class NodeDefinition(BaseModel):
    """A node to create."""

    name: str = Field(min_length=1)
    payload: Any = None


class EdgeDefinition(BaseModel):
    """A directed edge between two defined nodes."""

    source: str
    target: str
    weight: int = Field(ge=MIN_WEIGHT, le=MAX_WEIGHT)

    @model_validator(mode="before")
    @classmethod
    def normalize_from_to(cls, data: Any) -> Any:
        """Accept ``from``/``to`` as aliases for source and target."""
        if isinstance(data, dict):
            data = dict(data)
            if "from" in data and "source" not in data:
                data["source"] = data.pop("from")
            if "to" in data and "target" not in data:
                data["target"] = data.pop("to")
        return data


class GraphDefinition(BaseModel):
    """Complete definition of a graph: nodes first, then edges."""

    nodes: list[NodeDefinition] = Field(default_factory=list)
    edges: list[EdgeDefinition] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def normalize_nodes(cls, data: Any) -> Any:
        """Allow nodes as a name-to-payload mapping."""
        if isinstance(data, dict) and isinstance(data.get("nodes"), dict):
            data = dict(data)
            data["nodes"] = [
                {"name": name, "payload": payload}
                for name, payload in data["nodes"].items()
            ]
        return data

    @model_validator(mode="after")
    def check_references(self) -> "GraphDefinition":
        """Reject duplicate node names and edges to undefined nodes."""
        seen: set[str] = set()
        for node in self.nodes:
            if node.name in seen:
                raise ValueError(f"Duplicate node name: '{node.name}'")
            seen.add(node.name)

        for edge in self.edges:
            for endpoint in (edge.source, edge.target):
                if endpoint not in seen:
                    raise ValueError(
                        f"Edge {edge.source} -> {edge.target} references undefined node '{endpoint}'"
                    )
        return self
