"""Unit tests for the API Gateway Lambda binding."""

import base64
import json
from unittest.mock import AsyncMock

import pytest

from gqlbridge.application.use_cases.handle_request import GraphQLHttpHandler
from gqlbridge.domain.entities import CorsConfiguration
from gqlbridge.infrastructure.graphql.example_schema import schema
from gqlbridge.infrastructure.graphql.strawberry_engine import StrawberryGraphQLEngine
from gqlbridge.interfaces.serverless.aws_lambda import LambdaHandler, to_inbound_request


class _LambdaContext:
    aws_request_id = "req-123"


def _v1_event(method, body=None, qs=None, headers=None, base64_encoded=False):
    raw = json.dumps(body) if body is not None else None
    if raw is not None and base64_encoded:
        raw = base64.b64encode(raw.encode()).decode()
    return {
        "httpMethod": method,
        "headers": headers or {},
        "body": raw,
        "isBase64Encoded": base64_encoded,
        "queryStringParameters": qs,
    }


@pytest.fixture
def lambda_handler():
    handler = LambdaHandler(GraphQLHttpHandler(StrawberryGraphQLEngine(schema)))
    yield handler
    handler.close()


class TestToInboundRequest:
    def test_v1_event(self) -> None:
        event = _v1_event("post", {"query": "{ hello }"}, headers={"Origin": "https://a"})
        request = to_inbound_request(event)
        assert request.method == "POST"
        assert request.header("origin") == "https://a"
        assert json.loads(request.body) == {"query": "{ hello }"}

    def test_v2_event(self) -> None:
        event = {
            "requestContext": {"http": {"method": "GET"}},
            "queryStringParameters": {"query": "{ hello }"},
        }
        request = to_inbound_request(event)
        assert request.method == "GET"
        assert request.query == {"query": "{ hello }"}
        assert request.body == ""

    def test_base64_body_decoded(self) -> None:
        event = _v1_event("POST", {"query": "{ hello }"}, base64_encoded=True)
        assert json.loads(to_inbound_request(event).body) == {"query": "{ hello }"}


class TestLambdaHandler:
    def test_post_query(self, lambda_handler) -> None:
        result = lambda_handler(_v1_event("POST", {"query": "{ hello }"}), _LambdaContext())
        assert result["statusCode"] == 200
        assert result["body"] == '{"data":{"hello":"Hello world!"}}'
        assert result["headers"]["Access-Control-Allow-Origin"] == "*"

    def test_warm_invocations_reuse_engine(self, lambda_handler) -> None:
        for _ in range(3):
            result = lambda_handler(
                _v1_event("GET", qs={"query": "{ hello }"}), _LambdaContext()
            )
            assert result["statusCode"] == 200

    def test_preflight(self, lambda_handler) -> None:
        event = _v1_event(
            "OPTIONS",
            headers={"origin": "https://a", "access-control-request-method": "POST"},
        )
        result = lambda_handler(event, _LambdaContext())
        assert result["statusCode"] == 204
        assert result["body"] == ""
        assert result["headers"]["Access-Control-Allow-Methods"] == "POST"

    def test_missing_query(self, lambda_handler) -> None:
        result = lambda_handler(_v1_event("POST", {}), _LambdaContext())
        assert result["statusCode"] == 400
        assert json.loads(result["body"])["errors"][0]["message"] == "No query defined"

    def test_invalid_base64_body(self, lambda_handler) -> None:
        event = {
            "httpMethod": "POST",
            "body": "%%%",
            "isBase64Encoded": True,
            "headers": {"Origin": "https://a"},
        }
        result = lambda_handler(event, _LambdaContext())
        assert result["statusCode"] == 400
        assert result["headers"]["Access-Control-Allow-Origin"] == "*"
        assert result["headers"]["Content-Type"] == "application/json"
        assert result["body"].startswith('{"errors":[{"message":"Invalid base64')

    def test_invalid_base64_body_with_configured_origin(self) -> None:
        cors = CorsConfiguration(origin=True, credentials=True)
        handler = LambdaHandler(GraphQLHttpHandler(StrawberryGraphQLEngine(schema), cors=cors))
        event = {
            "httpMethod": "POST",
            "body": "%%%",
            "isBase64Encoded": True,
            "headers": {"origin": "https://app.example.com"},
        }
        try:
            result = handler(event, _LambdaContext())
        finally:
            handler.close()
        assert result["statusCode"] == 400
        assert result["headers"]["Access-Control-Allow-Origin"] == "https://app.example.com"
        assert result["headers"]["Access-Control-Allow-Credentials"] == "true"

    def test_engine_failure_returns_500(self) -> None:
        engine = AsyncMock()
        engine.execute_operation.side_effect = RuntimeError("boom")
        handler = LambdaHandler(GraphQLHttpHandler(engine))
        try:
            result = handler(_v1_event("POST", {"query": "{ hello }"}), _LambdaContext())
        finally:
            handler.close()
        assert result["statusCode"] == 500
        assert json.loads(result["body"]) == {"title": "500 Internal Server Error"}
