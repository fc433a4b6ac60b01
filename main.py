"""
Main entrypoint: validate configuration, then run the FastAPI server.

Env: HELIUS_API_KEY and PAY_TO_ADDRESS (required), PORT (default 3000),
API_HOST, HELIUS_BASE_URL, LOG_LEVEL, LOG_FORMAT. A .env file in the project
root is loaded when present.

Without this wrapper: uvicorn jeet_timer.api_server.app:app --host 0.0.0.0 --port 3000
"""

import sys

# Configure structured JSON logging before other imports that may log
from jeet_timer.jeet_logging import get_logger

logger = get_logger("main")


def main() -> None:
    """Load settings (exit 1 if invalid), then serve the API."""
    from jeet_timer.config.settings import get_settings
    from jeet_timer.core.exceptions import ConfigError

    try:
        settings = get_settings()
    except ConfigError as e:
        logger.error("main_config_error", message=str(e), problems=e.problems)
        sys.exit(1)

    from jeet_timer.api_server.app import app
    import uvicorn

    logger.info("main_server_starting", host=settings.host, port=settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
