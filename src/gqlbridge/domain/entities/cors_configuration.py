"""CORS configuration entity."""

from collections.abc import Sequence
from dataclasses import dataclass

# Sequences are stored as tuples so the configuration stays hashable and immutable.
HeaderList = str | Sequence[str]


@dataclass(frozen=True)
class CorsConfiguration:
    """CORS policy supplied once when the handler is built.

    ``origin`` is ``True`` (echo the request origin), a literal origin string,
    or a sequence of allowed origins. A field left as ``None`` (or empty) is
    not configured: the handler echoes what the preflight asks for instead.
    """

    origin: bool | HeaderList | None = None
    methods: HeaderList | None = None
    allowed_headers: HeaderList | None = None
    exposed_headers: HeaderList | None = None
    credentials: bool = False
    max_age: int | None = None

    def __post_init__(self) -> None:
        for name in ("origin", "methods", "allowed_headers", "exposed_headers"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, (bool, str)):
                object.__setattr__(self, name, tuple(value))
