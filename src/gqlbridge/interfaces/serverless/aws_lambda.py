"""AWS Lambda binding - API Gateway proxy events in, proxy responses out.

Handles REST API (payload v1, ``httpMethod``) and HTTP API (payload v2,
``requestContext.http.method``) events, including base64-encoded bodies.
"""

import asyncio
import base64
import binascii
import json
import logging
from typing import Any

from gqlbridge.application.use_cases.handle_request import GraphQLHttpHandler
from gqlbridge.domain.entities import InboundHttpRequest, OutboundHttpResponse
from gqlbridge.domain.exceptions import GqlBridgeError, GraphQLRequestError

logger = logging.getLogger(__name__)

HEADERS = {"Content-Type": "application/json"}


def _get_http_method(event: dict) -> str:
    """Return the HTTP method from an API Gateway v1 or v2 event, uppercased."""
    method = (
        (event or {}).get("httpMethod")
        or (event or {}).get("requestContext", {}).get("http", {}).get("method", "")
    )
    return (method or "").upper()


def _read_body(event: dict) -> str:
    raw = (event or {}).get("body") or ""
    if raw and (event or {}).get("isBase64Encoded"):
        try:
            return base64.b64decode(raw, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as exc:
            raise GraphQLRequestError(f"Invalid base64 request body: {exc}") from exc
    return raw


def to_inbound_request(event: dict) -> InboundHttpRequest:
    """Convert an API Gateway proxy event into the adapter's request entity."""
    return InboundHttpRequest(
        method=_get_http_method(event),
        headers=(event or {}).get("headers") or {},
        body=_read_body(event),
        query=(event or {}).get("queryStringParameters") or {},
    )


def to_proxy_response(response: OutboundHttpResponse) -> dict[str, Any]:
    return {
        "statusCode": response.status,
        "headers": dict(response.headers),
        "body": response.body,
    }


class LambdaHandler:
    """Callable Lambda entry point wrapping a GraphQLHttpHandler.

    Runs on one event loop for the lifetime of the execution environment, so
    engine startup done on the first invocation is reused by warm ones.
    """

    def __init__(
        self,
        handler: GraphQLHttpHandler,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._handler = handler
        self._loop = loop or asyncio.new_event_loop()

    def __call__(self, event: dict, context: Any) -> dict[str, Any]:
        request_id = getattr(context, "aws_request_id", None)
        try:
            request = to_inbound_request(event)
        except GqlBridgeError as exc:
            logger.info("Rejected event (invocation=%s): %s", request_id, exc.message)
            bodiless = InboundHttpRequest(
                method=_get_http_method(event),
                headers=(event or {}).get("headers") or {},
            )
            return to_proxy_response(self._handler.reject(bodiless, exc))

        try:
            response = self._loop.run_until_complete(self._handler(context, request))
        except Exception:
            logger.exception("Unhandled error (invocation=%s)", request_id)
            return {
                "statusCode": 500,
                "headers": HEADERS,
                "body": json.dumps({"title": "500 Internal Server Error"}),
            }
        return to_proxy_response(response)

    def close(self) -> None:
        """Close the event loop; the handler cannot be invoked afterwards."""
        self._loop.close()
