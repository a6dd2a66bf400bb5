"""CORS header names."""

from typing import Final


class CorsHeader:
    """Response and request headers of the CORS protocol."""

    ALLOW_ORIGIN: Final = "Access-Control-Allow-Origin"
    ALLOW_METHODS: Final = "Access-Control-Allow-Methods"
    ALLOW_HEADERS: Final = "Access-Control-Allow-Headers"
    EXPOSE_HEADERS: Final = "Access-Control-Expose-Headers"
    ALLOW_CREDENTIALS: Final = "Access-Control-Allow-Credentials"
    MAX_AGE: Final = "Access-Control-Max-Age"
    REQUEST_HEADERS: Final = "Access-Control-Request-Headers"
    REQUEST_METHOD: Final = "Access-Control-Request-Method"
    ORIGIN: Final = "Origin"
    VARY: Final = "Vary"
