"""
Pytest fixtures for SolKit tests. Fresh app per test; key-pairs generated per test.
"""

from __future__ import annotations

import pytest
from solders.keypair import Keypair


@pytest.fixture
def settings():
    from backend_solkit.config import Settings

    return Settings(host="127.0.0.1", port=8090, log_level="WARNING", log_format="console")


@pytest.fixture
def app(settings):
    from backend_solkit.api_server.server import create_app

    return create_app(settings)


@pytest.fixture
def client(app):
    """FastAPI TestClient over a freshly built app."""
    from fastapi.testclient import TestClient

    return TestClient(app)


@pytest.fixture
def keypair() -> Keypair:
    return Keypair()


@pytest.fixture
def pubkey_str() -> str:
    """Random valid base58 pubkey (32 bytes)."""
    return str(Keypair().pubkey())
