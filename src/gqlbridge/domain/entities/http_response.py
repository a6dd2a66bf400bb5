"""Outbound HTTP response entity."""

from dataclasses import dataclass, field


@dataclass
class OutboundHttpResponse:
    """HTTP response returned to the host trigger."""

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""
