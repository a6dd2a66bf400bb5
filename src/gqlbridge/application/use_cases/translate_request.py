"""Translate an inbound HTTP request into a GraphQL operation request."""

import json
from collections.abc import Mapping
from typing import Any

from gqlbridge.domain.entities import GraphQLOperationRequest, InboundHttpRequest
from gqlbridge.domain.exceptions import GraphQLRequestError, UnsupportedMethodError
from gqlbridge.domain.value_objects import HttpMethod

NO_QUERY_MESSAGE = "No query defined"
UNSUPPORTED_METHOD_MESSAGE = "Only GET and POST methods are supported"


def _as_mapping(name: str, value: Any) -> dict[str, Any] | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise GraphQLRequestError(f"{name} must be a JSON object")
    return dict(value)


def _decode_param(params: Mapping[str, Any], name: str) -> dict[str, Any] | None:
    """Query-string values arrive JSON-encoded; structured values pass through."""
    value = params.get(name)
    if not value:
        return None
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError as exc:
            raise GraphQLRequestError(str(exc)) from exc
    return _as_mapping(name, value)


def _from_query_string(params: Mapping[str, Any]) -> GraphQLOperationRequest:
    return GraphQLOperationRequest(
        query=params.get("query"),
        operation_name=params.get("operationName"),
        variables=_decode_param(params, "variables"),
        extensions=_decode_param(params, "extensions"),
    )


def _from_body(body: str) -> GraphQLOperationRequest:
    try:
        payload = json.loads(body) if body else {}
    except json.JSONDecodeError as exc:
        raise GraphQLRequestError(str(exc)) from exc
    if not isinstance(payload, dict):
        raise GraphQLRequestError("POST body must be a JSON object")

    query = payload.get("query")
    if not query or not isinstance(query, str):
        raise GraphQLRequestError(NO_QUERY_MESSAGE)

    operation_name = payload.get("operationName")
    if operation_name is not None and not isinstance(operation_name, str):
        raise GraphQLRequestError("operationName must be a string")

    return GraphQLOperationRequest(
        query=query,
        operation_name=operation_name,
        variables=_as_mapping("variables", payload.get("variables")),
        extensions=_as_mapping("extensions", payload.get("extensions")),
    )


def translate_request(request: InboundHttpRequest) -> GraphQLOperationRequest:
    """Build the GraphQL operation for a GET or POST request.

    Raises:
        GraphQLRequestError: body or query-string parameters are malformed.
        UnsupportedMethodError: method is neither GET nor POST.
    """
    if request.method == HttpMethod.GET:
        return _from_query_string(request.query)
    if request.method == HttpMethod.POST:
        return _from_body(request.body)
    raise UnsupportedMethodError(UNSUPPORTED_METHOD_MESSAGE)
