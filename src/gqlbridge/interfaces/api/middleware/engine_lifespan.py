"""Engine lifespan middleware - starts the GraphQL engine on ASGI startup."""

from typing import Any

from gqlbridge.application.ports import GraphQLEngine


class EngineLifespanMiddleware:
    """Middleware that runs engine startup when the ASGI server starts.

    Requests arriving before startup finishes still wait on the engine's
    readiness gate, so this only moves the work off the first request.
    """

    def __init__(self, engine: GraphQLEngine) -> None:
        self._engine = engine

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Start engine when ASGI server starts."""
        await self._engine.ensure_started()
