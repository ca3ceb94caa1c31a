"""
FastAPI/ASGI application entrypoint.

Settings are read once from the environment and passed to create_app().
Run with: uvicorn backend_solkit.api_server.app:app --host 127.0.0.1 --port 8090
"""

from backend_solkit.api_server.server import create_app
from backend_solkit.config import load_settings

app = create_app(load_settings())

__all__ = ["app"]
