"""Inbound HTTP request entity."""

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class InboundHttpRequest:
    """HTTP request as handed over by the host trigger.

    Header names are matched case-insensitively; they are stored lower-cased.
    """

    method: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str = ""
    query: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", (self.method or "").upper())
        object.__setattr__(
            self, "headers", {k.lower(): v for k, v in (self.headers or {}).items()}
        )
        object.__setattr__(self, "query", dict(self.query or {}))

    def header(self, name: str) -> str | None:
        """Return header value by case-insensitive name."""
        return self.headers.get(name.lower())
