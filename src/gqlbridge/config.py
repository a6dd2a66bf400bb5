"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from gqlbridge.domain.entities import CorsConfiguration


def _split(value: str) -> tuple[str, ...]:
    return tuple(v.strip() for v in value.split(",") if v.strip())


def _header_list(value: str) -> str | tuple[str, ...] | None:
    items = _split(value)
    if not items:
        return None
    return items[0] if len(items) == 1 else items


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, description="Bind port")
    graphql_path: str = Field(default="/graphql", description="GraphQL endpoint path")

    # CORS. Disabled means no policy at all: any origin is allowed ("*").
    cors_enabled: bool = Field(default=False, description="Apply the CORS policy below")
    cors_origin: str = Field(
        default="",
        description='"true", "false", a single origin or a comma-separated list',
    )
    cors_methods: str = Field(default="", description="Comma-separated allowed methods")
    cors_allowed_headers: str = Field(default="", description="Comma-separated allowed headers")
    cors_exposed_headers: str = Field(default="", description="Comma-separated exposed headers")
    cors_credentials: bool = Field(default=False, description="Allow credentials")
    cors_max_age: int = Field(default=0, ge=0, description="Preflight cache seconds, 0 = unset")

    # Application
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode, forces DEBUG logging")

    @property
    def effective_log_level(self) -> str:
        """Log level to configure; debug mode overrides log_level."""
        return "DEBUG" if self.debug else self.log_level.upper()

    def cors_origin_setting(self) -> bool | str | tuple[str, ...] | None:
        value = self.cors_origin.strip()
        if value.lower() in ("true", "false"):
            return value.lower() == "true"
        items = _split(value)
        if not items:
            return None
        return items if len(items) > 1 else items[0]

    def cors_configuration(self) -> CorsConfiguration | None:
        """CORS policy for the handler, or None when CORS is not configured."""
        if not self.cors_enabled:
            return None
        return CorsConfiguration(
            origin=self.cors_origin_setting(),
            methods=_header_list(self.cors_methods),
            allowed_headers=_header_list(self.cors_allowed_headers),
            exposed_headers=_header_list(self.cors_exposed_headers),
            credentials=self.cors_credentials,
            max_age=self.cors_max_age or None,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
