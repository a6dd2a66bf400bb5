"""GraphQL endpoint - Falcon sink that hands every method to the handler."""

from typing import Any

import falcon
import falcon.asgi

from gqlbridge.application.use_cases.handle_request import GraphQLHttpHandler
from gqlbridge.domain.entities import InboundHttpRequest


def _single_values(params: dict[str, Any]) -> dict[str, str]:
    """Falcon returns a list for repeated parameters; the last value wins."""
    return {k: v[-1] if isinstance(v, list) else v for k, v in params.items()}


async def to_inbound_request(req: falcon.asgi.Request) -> InboundHttpRequest:
    """Convert a Falcon ASGI request into the adapter's request entity."""
    raw = await req.stream.read()
    return InboundHttpRequest(
        method=req.method,
        headers=req.headers,
        body=raw.decode("utf-8", errors="replace") if raw else "",
        query=_single_values(req.params),
    )


class GraphQLSink:
    """/graphql - GET, POST and OPTIONS; anything else is rejected by the handler."""

    def __init__(self, handler: GraphQLHttpHandler) -> None:
        self._handler = handler

    async def handle(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, **kwargs: Any
    ) -> None:
        """Run the handler and copy its response onto the Falcon response."""
        inbound = await to_inbound_request(req)
        outbound = await self._handler(req.context, inbound)
        resp.status = falcon.code_to_http_status(outbound.status)
        resp.set_headers(outbound.headers)
        resp.text = outbound.body or None
