"""
Tareas API entry point.

Builds the FastAPI application and serves it with uvicorn:

    python -m app.main
"""

import logging
import socket

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings
from app.task_registry import (
    InMemoryTaskRegistry,
    RegistryPort,
    create_task_router,
    register_error_handlers,
)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)


def create_app(settings: Settings | None = None, registry: RegistryPort | None = None) -> FastAPI:
    """
    Create the Tareas API application.

    Args:
        settings: Runtime settings. Read from the environment when omitted.
        registry: Task storage. A registry holding the seed tasks is created
            when omitted.

    Returns:
        Configured FastAPI application. The registry is available as
        ``app.state.registry``.
    """
    if settings is None:
        settings = Settings.from_env()
    if registry is None:
        registry = InMemoryTaskRegistry.with_seed_tasks(id_start=settings.id_start)

    app = FastAPI(
        title="Tareas API",
        version="1.0.0",
        docs_url=settings.docs_path,
    )
    app.state.registry = registry

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(create_task_router(registry))
    register_error_handlers(app)

    return app


class TareasServer(uvicorn.Server):
    """uvicorn server that announces the API and docs URLs once bound."""

    def __init__(self, config: uvicorn.Config, settings: Settings) -> None:
        super().__init__(config)
        self.settings = settings

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            base_url = f"http://localhost:{self.settings.port}"
            logging.info(f"API en {base_url}")
            logging.info(f"Docs en {base_url}{self.settings.docs_path}")


def run() -> None:
    """Serve the API on the configured host and port."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    app = create_app(settings)
    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
    TareasServer(config, settings).run()


if __name__ == "__main__":
    run()
