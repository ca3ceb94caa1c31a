"""
Main entrypoint: FastAPI server for Backend SolKit.

Settings are built once from env (.env supported) and passed to the app;
nothing else holds process-wide state.

Env: SOLKIT_HOST / API_HOST (default 127.0.0.1), SOLKIT_PORT / API_PORT (default 8090),
LOG_LEVEL, LOG_FORMAT.

Equivalent: uvicorn backend_solkit.api_server.app:app --host 127.0.0.1 --port 8090
"""

import sys

import uvicorn

from backend_solkit.solkit_logging import get_logger

logger = get_logger("main")


def main() -> None:
    """Load settings, build the app, run uvicorn in the main thread."""
    from backend_solkit.api_server.server import create_app
    from backend_solkit.config import load_settings

    try:
        settings = load_settings()
    except ValueError as e:
        logger.error("main_config_error", error=str(e))
        sys.exit(1)

    app = create_app(settings)
    logger.info("main_api_starting", host=settings.host, port=settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
