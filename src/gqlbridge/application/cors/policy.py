"""CORS policy - static and per-request response headers, preflight detection."""

from collections.abc import Mapping
from types import MappingProxyType

from gqlbridge.domain.entities import (
    CorsConfiguration,
    InboundHttpRequest,
    OutboundHttpResponse,
)
from gqlbridge.domain.value_objects import CorsHeader, HttpMethod

HeaderMap = dict[str, str]


def _join(value: str | tuple[str, ...]) -> str:
    if isinstance(value, str):
        return value
    return ",".join(value)


def compute_static_headers(config: CorsConfiguration | None) -> HeaderMap:
    """Headers that depend only on the configuration.

    Computed once per handler; callers must copy before layering request data.
    """
    headers: HeaderMap = {}
    if config is None:
        return headers

    if config.methods:
        headers[CorsHeader.ALLOW_METHODS] = _join(config.methods)
    if config.allowed_headers:
        headers[CorsHeader.ALLOW_HEADERS] = _join(config.allowed_headers)
    if config.exposed_headers:
        headers[CorsHeader.EXPOSE_HEADERS] = _join(config.exposed_headers)
    if config.credentials:
        headers[CorsHeader.ALLOW_CREDENTIALS] = "true"
    if config.max_age:
        headers[CorsHeader.MAX_AGE] = str(config.max_age)
    return headers


def is_preflight(request: InboundHttpRequest) -> bool:
    """OPTIONS requests are answered by the CORS layer alone."""
    return request.method == HttpMethod.OPTIONS


def _allowed_origin(config: CorsConfiguration | None, origin: str | None) -> str | None:
    if config is None:
        return "*"
    if not config.origin:
        return None
    if isinstance(config.origin, str):
        return config.origin
    if config.origin is True:
        return origin or None
    if origin and origin in config.origin:
        return origin
    return None


def _append_vary(headers: HeaderMap, value: str) -> None:
    current = headers.get(CorsHeader.VARY)
    headers[CorsHeader.VARY] = f"{current}, {value}" if current else value


def compute_dynamic_headers(
    static_headers: Mapping[str, str],
    config: CorsConfiguration | None,
    request: InboundHttpRequest,
) -> HeaderMap:
    """Layer origin and preflight-echo headers for one request on the static set."""
    headers: HeaderMap = dict(static_headers)

    allowed_origin = _allowed_origin(config, request.header(CorsHeader.ORIGIN))
    if allowed_origin is not None:
        headers[CorsHeader.ALLOW_ORIGIN] = allowed_origin

    if not is_preflight(request):
        return headers

    requested_headers = request.header(CorsHeader.REQUEST_HEADERS)
    if requested_headers and (config is None or not config.allowed_headers):
        headers[CorsHeader.ALLOW_HEADERS] = requested_headers
        _append_vary(headers, CorsHeader.REQUEST_HEADERS)

    requested_method = request.header(CorsHeader.REQUEST_METHOD)
    if requested_method and (config is None or not config.methods):
        headers[CorsHeader.ALLOW_METHODS] = requested_method

    return headers


class CorsPolicy:
    """Configured CORS policy with its precomputed static headers."""

    def __init__(self, config: CorsConfiguration | None = None) -> None:
        self._config = config
        self._static_headers = compute_static_headers(config)

    @property
    def config(self) -> CorsConfiguration | None:
        return self._config

    @property
    def static_headers(self) -> Mapping[str, str]:
        return MappingProxyType(self._static_headers)

    def headers_for(self, request: InboundHttpRequest) -> HeaderMap:
        """Response headers for this request."""
        return compute_dynamic_headers(self._static_headers, self._config, request)

    def is_preflight(self, request: InboundHttpRequest) -> bool:
        return is_preflight(request)

    def preflight_response(self, headers: HeaderMap) -> OutboundHttpResponse:
        """204 with no body; nothing else runs for a preflight."""
        return OutboundHttpResponse(status=204, headers=headers, body="")
