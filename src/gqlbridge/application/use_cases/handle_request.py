"""GraphQL HTTP handler - CORS negotiation, translation and dispatch."""

import json
import logging
from typing import Any

from gqlbridge.application.cors.policy import CorsPolicy
from gqlbridge.application.ports import GraphQLEngine
from gqlbridge.application.use_cases.translate_request import translate_request
from gqlbridge.domain.entities import (
    CorsConfiguration,
    InboundHttpRequest,
    OutboundHttpResponse,
)
from gqlbridge.domain.exceptions import GqlBridgeError, UnsupportedMethodError

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
ALLOWED_METHODS = "GET, POST, OPTIONS"


def _invocation_id(context: Any) -> str | None:
    """Azure passes ``invocation_id``, AWS Lambda ``aws_request_id``."""
    for attr in ("invocation_id", "aws_request_id"):
        value = getattr(context, attr, None)
        if value:
            return str(value)
    return None


class GraphQLHttpHandler:
    """Serve one HTTP request against a GraphQL engine.

    The handler is shared by concurrent invocations; it keeps no per-request
    state and the CORS policy is immutable after construction.
    """

    def __init__(
        self, engine: GraphQLEngine, cors: CorsConfiguration | None = None
    ) -> None:
        self._engine = engine
        self._cors = CorsPolicy(cors)

    @property
    def cors(self) -> CorsPolicy:
        return self._cors

    async def __call__(
        self, context: Any, request: InboundHttpRequest
    ) -> OutboundHttpResponse:
        """Handle request: preflight, rejection or executed operation."""
        invocation_id = _invocation_id(context)
        headers = self._cors.headers_for(request)

        if self._cors.is_preflight(request):
            logger.debug("Preflight answered (invocation=%s)", invocation_id)
            return self._cors.preflight_response(headers)

        try:
            graphql_request = translate_request(request)
        except GqlBridgeError as exc:
            logger.info(
                "Rejected %s request (invocation=%s): %s",
                request.method,
                invocation_id,
                exc.message,
            )
            return self._error_response(exc, headers)

        await self._engine.ensure_started()
        result = await self._engine.execute_operation(graphql_request, request)

        headers["Content-Type"] = JSON_CONTENT_TYPE
        return OutboundHttpResponse(status=200, headers=headers, body=result.serialize())

    def reject(
        self, request: InboundHttpRequest, exc: GqlBridgeError
    ) -> OutboundHttpResponse:
        """Error response for a request a host binding could not even build.

        Carries the same CORS headers as any other response to ``request``.
        """
        return self._error_response(exc, self._cors.headers_for(request))

    def _error_response(
        self, exc: GqlBridgeError, headers: dict[str, str]
    ) -> OutboundHttpResponse:
        headers["Content-Type"] = JSON_CONTENT_TYPE
        if isinstance(exc, UnsupportedMethodError):
            headers["Allow"] = ALLOWED_METHODS
        return OutboundHttpResponse(
            status=exc.status,
            headers=headers,
            body=json.dumps(exc.to_body(), separators=(",", ":"), ensure_ascii=False),
        )
