"""GraphQL engine port - schema execution behind the HTTP adapter."""

from typing import Protocol

from gqlbridge.domain.entities import (
    GraphQLExecutionResult,
    GraphQLOperationRequest,
    InboundHttpRequest,
)


class GraphQLEngine(Protocol):
    """Port for running GraphQL operations."""

    async def ensure_started(self) -> None: ...

    async def execute_operation(
        self, request: GraphQLOperationRequest, raw_request: InboundHttpRequest
    ) -> GraphQLExecutionResult: ...
