"""Falcon ASGI application."""

import logging
import re

import falcon
import falcon.asgi
from falcon.asgi import App

from gqlbridge.application.ports import GraphQLEngine
from gqlbridge.application.use_cases.handle_request import GraphQLHttpHandler
from gqlbridge.interfaces.api.middleware.engine_lifespan import EngineLifespanMiddleware
from gqlbridge.interfaces.api.resources.graphql import GraphQLSink
from gqlbridge.interfaces.api.resources.health import HealthResource

logger = logging.getLogger(__name__)


async def log_exception(req, resp, ex, params) -> None:
    logger.error("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    handler: GraphQLHttpHandler,
    engine: GraphQLEngine,
    health_resource: HealthResource,
    graphql_path: str = "/graphql",
) -> App:
    """Create Falcon ASGI app with the GraphQL sink and health routes."""
    app = falcon.asgi.App(middleware=[EngineLifespanMiddleware(engine)])
    app.add_error_handler(Exception, log_exception)
    app.add_route("/health", health_resource)
    app.add_route("/health/ready", health_resource, suffix="ready")
    sink = GraphQLSink(handler)
    app.add_sink(sink.handle, prefix=re.compile(rf"{re.escape(graphql_path.rstrip('/'))}/?$"))
    return app
