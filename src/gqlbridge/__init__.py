"""gqlbridge - HTTP-to-GraphQL request adapter with CORS negotiation."""

__version__ = "0.1.0"
