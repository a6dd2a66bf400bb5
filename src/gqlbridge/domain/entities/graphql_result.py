"""GraphQL execution result entity."""

import json
from dataclasses import dataclass
from typing import Any


@dataclass
class GraphQLExecutionResult:
    """Result of one operation, errors already formatted by the engine."""

    data: dict[str, Any] | None = None
    errors: list[dict[str, Any]] | None = None
    extensions: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """GraphQL response map; ``data`` is omitted only when nothing was executed."""
        payload: dict[str, Any] = {}
        if self.errors:
            payload["errors"] = self.errors
        if self.data is not None or not self.errors:
            payload["data"] = self.data
        if self.extensions:
            payload["extensions"] = self.extensions
        return payload

    def serialize(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)
