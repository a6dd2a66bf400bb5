"""Health check endpoints."""

import falcon.asgi

from gqlbridge.infrastructure.graphql.readiness import ReadinessGate


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, readiness: ReadinessGate | None = None) -> None:
        self._readiness = readiness

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /health/ready - readiness (GraphQL engine started)."""
        if self._readiness is not None and not self._readiness.done:
            resp.media = {"status": "starting"}
            resp.status = falcon.HTTP_503
            return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
