"""Entrypoint that reads PORT from the environment and serves the app."""
import logging
import sys

import uvicorn

from greeter.config import ConfigError, load_settings
from greeter.main import configure_logging, create_app

logger = logging.getLogger("greeter.run")


def main():
    try:
        settings = load_settings()
    except ConfigError as e:
        configure_logging()
        logger.error(str(e))
        sys.exit(1)

    try:
        app = create_app(settings)
    except OSError as e:
        logger.error(f"Could not resolve hostname: {e}")
        sys.exit(1)

    logger.info(f"Server starting on port {settings.port}")
    # uvicorn exits non-zero by itself when the port cannot be bound
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)


if __name__ == "__main__":
    main()
