"""
Application settings.

Responsibilities:
- Build a typed, immutable Settings value from the environment (and .env) once
  at process start.
- Hand it to the API server explicitly; nothing reads global config per request.
"""

from __future__ import annotations

from dataclasses import dataclass

from backend_solkit.config.env import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    env_str,
    get_bind_host,
    get_bind_port,
    load_solkit_env,
)


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration. Constructed once, never mutated."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def bind_address(self) -> str:
        return f"{self.host}:{self.port}"


def load_settings() -> Settings:
    """
    Return settings read from the environment.

    Returns:
        Settings with host, port, log_level, log_format.
    Raises:
        ValueError if SOLKIT_PORT / API_PORT is not a valid port.
    """
    load_solkit_env()
    return Settings(
        host=get_bind_host(),
        port=get_bind_port(),
        log_level=env_str("LOG_LEVEL", default="INFO").upper(),
        log_format=env_str("LOG_FORMAT", default="json").lower(),
    )
