"""Strawberry GraphQL engine adapter."""

import logging

import strawberry

from gqlbridge.domain.entities import (
    GraphQLExecutionResult,
    GraphQLOperationRequest,
    InboundHttpRequest,
)
from gqlbridge.infrastructure.graphql.readiness import ReadinessGate

logger = logging.getLogger(__name__)

EMPTY_QUERY_MESSAGE = "GraphQL operations must contain a non-empty `query`."


class StrawberryGraphQLEngine:
    """GraphQLEngine over a strawberry schema."""

    def __init__(self, schema: strawberry.Schema) -> None:
        self._schema = schema
        self._readiness = ReadinessGate(self._start)
        self._sdl: str | None = None

    @property
    def readiness(self) -> ReadinessGate:
        return self._readiness

    @property
    def sdl(self) -> str | None:
        """Schema SDL, rendered during startup."""
        return self._sdl

    async def _start(self) -> None:
        self._sdl = self._schema.as_str()
        logger.info("GraphQL schema ready (%d bytes of SDL)", len(self._sdl))

    async def ensure_started(self) -> None:
        await self._readiness.wait()

    async def execute_operation(
        self, request: GraphQLOperationRequest, raw_request: InboundHttpRequest
    ) -> GraphQLExecutionResult:
        """Execute operation; execution errors come back formatted in the result."""
        if not request.query:
            return GraphQLExecutionResult(errors=[{"message": EMPTY_QUERY_MESSAGE}])

        result = await self._schema.execute(
            request.query,
            variable_values=request.variables,
            context_value={
                "request": raw_request,
                "extensions": request.extensions or {},
            },
            operation_name=request.operation_name,
        )
        return GraphQLExecutionResult(
            data=result.data,
            errors=[error.formatted for error in result.errors] if result.errors else None,
            extensions=result.extensions or None,
        )
