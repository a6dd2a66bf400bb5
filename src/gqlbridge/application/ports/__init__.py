"""Application ports - interfaces for external adapters."""

from gqlbridge.application.ports.graphql_engine import GraphQLEngine

__all__ = [
    "GraphQLEngine",
]
