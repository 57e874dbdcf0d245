"""Pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator, Callable
from typing import Any

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from starlette.requests import Request

from problem_pipeline.config import Settings
from problem_pipeline.main import create_app


def make_settings(**overrides: Any) -> Settings:
    """Build settings without reading the environment's .env file."""
    return Settings(_env_file=None, **overrides)


@pytest.fixture
def make_request() -> Callable[..., Request]:
    """Factory for bare Starlette requests.

    Returns:
        Callable taking a path and optional correlation id
    """

    def _make(path: str = "/", correlation_id: str | None = None) -> Request:
        state: dict[str, Any] = {}
        if correlation_id is not None:
            state["correlation_id"] = correlation_id
        return Request(
            {
                "type": "http",
                "method": "GET",
                "path": path,
                "root_path": "",
                "query_string": b"",
                "headers": [],
                "state": state,
            }
        )

    return _make


@pytest.fixture
def app() -> FastAPI:
    """Application in production mode, without diagnostics."""
    return create_app(make_settings(environment="production"))


@pytest.fixture
def diagnostic_app() -> FastAPI:
    """Application in development mode, with diagnostics."""
    return create_app(make_settings(environment="development"))


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
async def diagnostic_client(
    diagnostic_app: FastAPI,
) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client against the diagnostic application."""
    async with AsyncClient(
        transport=ASGITransport(app=diagnostic_app),
        base_url="http://test",
    ) as client:
        yield client
