"""Pytest fixtures for gqlbridge tests."""

from __future__ import annotations

import pytest

from gqlbridge.application.use_cases.handle_request import GraphQLHttpHandler
from gqlbridge.domain.entities import (
    CorsConfiguration,
    GraphQLExecutionResult,
    GraphQLOperationRequest,
    InboundHttpRequest,
)


# --- Fake engine ---


class FakeGraphQLEngine:
    """In-memory GraphQLEngine that records calls."""

    def __init__(self, result: GraphQLExecutionResult | None = None) -> None:
        self.result = result or GraphQLExecutionResult(data={"hello": "Hello world!"})
        self.start_calls = 0
        self.executed: list[tuple[GraphQLOperationRequest, InboundHttpRequest]] = []

    async def ensure_started(self) -> None:
        self.start_calls += 1

    async def execute_operation(
        self, request: GraphQLOperationRequest, raw_request: InboundHttpRequest
    ) -> GraphQLExecutionResult:
        self.executed.append((request, raw_request))
        return self.result


class FakeContext:
    """Host invocation context."""

    invocation_id = "inv-1"


@pytest.fixture
def fake_engine() -> FakeGraphQLEngine:
    """Fresh fake engine for each test."""
    return FakeGraphQLEngine()


@pytest.fixture
def context() -> FakeContext:
    return FakeContext()


@pytest.fixture
def handler(fake_engine: FakeGraphQLEngine) -> GraphQLHttpHandler:
    """Handler without CORS configuration (wildcard origin)."""
    return GraphQLHttpHandler(fake_engine)


@pytest.fixture
def cors_config() -> CorsConfiguration:
    """Restrictive CORS configuration with every static field set."""
    return CorsConfiguration(
        origin=("https://app.example.com", "https://admin.example.com"),
        methods=("GET", "POST"),
        allowed_headers=("Content-Type", "Authorization"),
        exposed_headers="X-Request-Id",
        credentials=True,
        max_age=600,
    )
