"""HTTP methods understood by the GraphQL endpoint."""

from enum import StrEnum


class HttpMethod(StrEnum):
    """Methods with dedicated handling."""

    GET = "GET"
    POST = "POST"
    OPTIONS = "OPTIONS"
