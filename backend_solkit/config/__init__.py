"""
Configuration management for Backend SolKit.

Loads settings from environment variables and an optional .env file once at
startup. The resulting Settings value is immutable and passed explicitly to
the API server.
"""

from backend_solkit.config.settings import Settings, load_settings  # noqa: F401

__all__ = ["Settings", "load_settings"]
