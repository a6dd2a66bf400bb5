"""GraphQL operation request entity."""

from dataclasses import dataclass
from typing import Any


@dataclass
class GraphQLOperationRequest:
    """Operation to run against the schema."""

    query: str | None
    operation_name: str | None = None
    variables: dict[str, Any] | None = None
    extensions: dict[str, Any] | None = None
