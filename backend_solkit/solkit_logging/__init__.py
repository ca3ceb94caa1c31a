"""
Structured logging for Backend SolKit.

JSON logs with timestamp, event_type and request fields.
Use get_logger() in every module; never pass key material or message bodies.
"""

from backend_solkit.solkit_logging.logger import get_logger

__all__ = ["get_logger"]
