"""Pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator, Generator

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from app.task_registry import InMemoryTaskRegistry


@pytest.fixture
def settings() -> Settings:
    """Settings independent of the process environment."""
    return Settings()


@pytest.fixture
def registry() -> InMemoryTaskRegistry:
    """Create a registry holding the seed tasks."""
    return InMemoryTaskRegistry.with_seed_tasks()


@pytest.fixture
def app(settings: Settings, registry: InMemoryTaskRegistry) -> FastAPI:
    """Create an application bound to the registry fixture."""
    return create_app(settings, registry)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Create a synchronous test client."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Create an async client talking to the app in-process."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
