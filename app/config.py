"""
Application settings loaded from environment variables.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_PORT = 3000
DEFAULT_CORS_ORIGINS: tuple[str, ...] = (
    "http://localhost:5173",
    "https://app-nu-murex.vercel.app",
)


def _env_int(env: Mapping[str, str], name: str, default: int | None) -> int | None:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"Environment variable {name} must be an integer, got '{raw}'") from e


def _env_list(env: Mapping[str, str], name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    return tuple(part for part in raw.replace(",", " ").split() if part)


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings.

    Attributes:
        host: Interface to bind. All interfaces by default.
        port: TCP port to bind.
        cors_origins: Origins allowed to make cross-origin requests (exact match).
        log_level: Root logging level name.
        docs_path: Path of the Swagger UI.
        id_start: First id handed out to created tasks. None derives it from
            the seed tasks.
    """

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS
    log_level: str = "INFO"
    docs_path: str = "/docs"
    id_start: int | None = None

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            env: Variables to read. Defaults to os.environ.

        Returns:
            Settings with every unset variable left at its default.

        Raises:
            ValueError: If PORT or TAREAS_ID_START is not an integer.
        """
        if env is None:
            env = os.environ

        port = _env_int(env, "PORT", DEFAULT_PORT)
        return cls(
            host=env.get("HOST", "").strip() or "0.0.0.0",
            port=DEFAULT_PORT if port is None else port,
            cors_origins=_env_list(env, "CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
            log_level=env.get("LOG_LEVEL", "").strip().upper() or "INFO",
            id_start=_env_int(env, "TAREAS_ID_START", None),
        )
