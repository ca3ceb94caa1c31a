"""
HTTP middleware — request logging and timing.

Logs method, path, status and duration per request. Bodies are never logged:
they can carry secret keys and messages.
"""

from __future__ import annotations

import time
from typing import Any, Awaitable, Callable

from fastapi import FastAPI, Request, Response

from backend_solkit.solkit_logging import get_logger

logger = get_logger(__name__)


def register_request_logging(app: FastAPI) -> None:
    """Attach the request logging middleware to `app`."""

    @app.middleware("http")
    async def log_requests(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Any:
        t0 = time.perf_counter()
        status = 500  # unhandled exception in call_next
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            duration_ms = (time.perf_counter() - t0) * 1000
            logger.info(
                "http_request",
                method=request.method,
                path=request.url.path,
                status=status,
                duration_ms=round(duration_ms, 2),
            )
