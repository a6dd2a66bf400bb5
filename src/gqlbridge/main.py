"""Application entry points and composition root."""

import logging
from typing import Any

import strawberry
import uvicorn

from gqlbridge import __version__
from gqlbridge.application.use_cases.handle_request import GraphQLHttpHandler
from gqlbridge.config import Settings, get_settings
from gqlbridge.infrastructure.graphql.example_schema import schema as example_schema
from gqlbridge.infrastructure.graphql.strawberry_engine import StrawberryGraphQLEngine
from gqlbridge.interfaces.api.app import create_app
from gqlbridge.interfaces.api.resources.health import HealthResource
from gqlbridge.interfaces.serverless.aws_lambda import LambdaHandler
from gqlbridge.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_handler(
    settings: Settings | None = None, schema: strawberry.Schema | None = None
) -> tuple[GraphQLHttpHandler, StrawberryGraphQLEngine]:
    """Build the handler and its engine from settings."""
    settings = settings or get_settings()
    engine = StrawberryGraphQLEngine(schema or example_schema)
    handler = GraphQLHttpHandler(engine, cors=settings.cors_configuration())
    return handler, engine


def create_gqlbridge_app(
    settings: Settings | None = None, schema: strawberry.Schema | None = None
):
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    handler, engine = create_handler(settings, schema)
    return create_app(
        handler,
        engine,
        HealthResource(engine.readiness),
        graphql_path=settings.graphql_path,
    )


_lambda_handler: LambdaHandler | None = None


def lambda_handler(event: dict, context: Any) -> dict:
    """AWS Lambda entry point; the handler is built on the first invocation."""
    global _lambda_handler
    if _lambda_handler is None:
        settings = get_settings()
        configure_logging(settings.effective_log_level)
        handler, _ = create_handler(settings)
        _lambda_handler = LambdaHandler(handler)
    return _lambda_handler(event, context)


def main() -> None:
    """CLI entry point - run the ASGI app under uvicorn."""
    settings = get_settings()
    configure_logging(settings.effective_log_level)
    logger.info("gqlbridge v%s (%s)", __version__, settings.environment)
    app = create_gqlbridge_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.effective_log_level.lower())
