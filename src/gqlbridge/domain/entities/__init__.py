"""Domain entities."""

from gqlbridge.domain.entities.cors_configuration import CorsConfiguration
from gqlbridge.domain.entities.graphql_request import GraphQLOperationRequest
from gqlbridge.domain.entities.graphql_result import GraphQLExecutionResult
from gqlbridge.domain.entities.http_request import InboundHttpRequest
from gqlbridge.domain.entities.http_response import OutboundHttpResponse

__all__ = [
    "CorsConfiguration",
    "GraphQLExecutionResult",
    "GraphQLOperationRequest",
    "InboundHttpRequest",
    "OutboundHttpResponse",
]
