"""
Environment variable loading for SolKit.

- SOLKIT_HOST / API_HOST: bind address (default: 127.0.0.1)
- SOLKIT_PORT / API_PORT: bind port (default: 8090)
- LOG_LEVEL, LOG_FORMAT: see solkit_logging.logger
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

# Project root: config is backend_solkit/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_BACKEND_DIR = _CONFIG_DIR.parent
_ROOT = _BACKEND_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8090


def load_solkit_env() -> None:
    """Load .env from project root. Safe to call multiple times; existing env wins."""
    from dotenv import load_dotenv

    load_dotenv(_ENV_PATH, override=False)


def env_str(*names: str, default: str = "") -> str:
    """First non-empty value among env vars `names`, stripped."""
    for name in names:
        raw = (os.getenv(name) or "").strip()
        if raw:
            return raw
    return default


def get_bind_host() -> str:
    return env_str("SOLKIT_HOST", "API_HOST", default=DEFAULT_HOST)


def get_bind_port() -> int:
    """
    Return bind port from SOLKIT_PORT / API_PORT.
    Raises ValueError when the value is not an integer in 1..65535.
    """
    raw = env_str("SOLKIT_PORT", "API_PORT", default=str(DEFAULT_PORT))
    try:
        port = int(raw)
    except ValueError as e:
        raise ValueError(f"Invalid port: {raw!r}") from e
    if not 0 < port < 65536:
        raise ValueError(f"Port out of range: {port}")
    return port
