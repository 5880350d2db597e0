"""Tests for the application factory and server startup."""

import logging
import socket

import pytest
import uvicorn
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import TareasServer, create_app
from app.task_registry import InMemoryTaskRegistry


class TestCreateApp:
    """Test create_app."""

    def test_default_registry_is_seeded(self) -> None:
        """Test that the app owns a seeded registry when none is given."""
        app = create_app(Settings())

        assert isinstance(app.state.registry, InMemoryTaskRegistry)
        assert app.state.registry.count() == 2

    def test_apps_do_not_share_state(self) -> None:
        """Test that each app gets its own registry."""
        first = TestClient(create_app(Settings()))
        second = TestClient(create_app(Settings()))

        first.delete("/tareas/1")

        assert len(first.get("/tareas").json()) == 1
        assert len(second.get("/tareas").json()) == 2

    def test_id_start_setting(self) -> None:
        """Test that the configured starting id is used."""
        client = TestClient(create_app(Settings(id_start=50)))

        assert client.post("/tareas", json={"titulo": "X"}).json()["id"] == 50

    def test_configured_origins(self) -> None:
        """Test that CORS follows the configured allow-list."""
        client = TestClient(create_app(Settings(cors_origins=("https://a.example",))))

        allowed = client.get("/health", headers={"Origin": "https://a.example"})
        default = client.get("/health", headers={"Origin": "http://localhost:5173"})

        assert allowed.headers["access-control-allow-origin"] == "https://a.example"
        assert "access-control-allow-origin" not in default.headers


@pytest.mark.asyncio
class TestTareasServer:
    """Test the startup log lines."""

    async def test_logs_urls_after_bind(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that both URLs are logged once the server has started."""

        async def fake_startup(self: uvicorn.Server, sockets: list[socket.socket] | None = None) -> None:
            self.started = True

        monkeypatch.setattr(uvicorn.Server, "startup", fake_startup)
        settings = Settings(port=4321)
        server = TareasServer(uvicorn.Config(create_app(settings), port=settings.port), settings)

        with caplog.at_level(logging.INFO):
            await server.startup()

        messages = [record.getMessage() for record in caplog.records]
        assert "API en http://localhost:4321" in messages
        assert "Docs en http://localhost:4321/docs" in messages

    async def test_no_logs_when_startup_fails(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that nothing is announced if the server did not start."""

        async def fake_startup(self: uvicorn.Server, sockets: list[socket.socket] | None = None) -> None:
            self.should_exit = True

        monkeypatch.setattr(uvicorn.Server, "startup", fake_startup)
        settings = Settings()
        server = TareasServer(uvicorn.Config(create_app(settings)), settings)

        with caplog.at_level(logging.INFO):
            await server.startup()

        assert not any("API en" in record.getMessage() for record in caplog.records)
