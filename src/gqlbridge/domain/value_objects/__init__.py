"""Domain value objects."""

from gqlbridge.domain.value_objects.cors_header import CorsHeader
from gqlbridge.domain.value_objects.http_method import HttpMethod

__all__ = [
    "CorsHeader",
    "HttpMethod",
]
