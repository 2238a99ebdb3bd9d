"""Parsing of in-memory graph definitions."""

from typing import Any

from pydantic import ValidationError

from ..errors import DefinitionError
from .models import GraphDefinition


def parse_definition(data: dict[str, Any]) -> GraphDefinition:
    """Validate raw data into a GraphDefinition.

    Args:
        data: Mapping with ``nodes`` and ``edges`` keys.

    Returns:
        The validated GraphDefinition.

    Raises:
        DefinitionError: If the data fails validation.
    """
    if not isinstance(data, dict):
        raise DefinitionError(f"Expected a mapping at root, got {type(data).__name__}")

    try:
        return GraphDefinition.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise DefinitionError(
            f"Graph definition failed with {len(errors)} error(s)", errors
        ) from e
