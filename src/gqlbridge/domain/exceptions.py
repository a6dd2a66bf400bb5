"""Domain exceptions."""

from typing import Any


class GqlBridgeError(Exception):
    """Base exception for gqlbridge."""

    status: int = 500

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else self.__class__.__name__

    def to_body(self) -> dict[str, Any]:
        return {"error": self.message}


class GraphQLRequestError(GqlBridgeError):
    """Inbound request cannot be turned into a GraphQL operation.

    Rendered as a GraphQL-formatted error so clients handle it the same way
    as an execution error.
    """

    status = 400

    def to_body(self) -> dict[str, Any]:
        return {"errors": [{"message": self.message}]}


class UnsupportedMethodError(GqlBridgeError):
    """HTTP method is not one the GraphQL endpoint serves."""

    status = 405
