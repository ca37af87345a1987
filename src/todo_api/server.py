"""
Process entry point for the todo service.

Loads configuration (optionally seeded from ./.env), opens the database once,
builds the FastAPI app around it and serves it with uvicorn. Configuration or
storage failures terminate the process before it starts listening.

Usage:
    python -m todo_api
    todo-api
"""
from __future__ import annotations

import logging
import sys

import uvicorn

from .db import open_database
from .errors import ConfigError, StorageError
from .main import create_app
from .settings import get_settings, load_env_file

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# PUBLIC_INTERFACE
def main() -> int:
    """
    Run the service until interrupted.

    Returns:
        Process exit status: 1 if startup failed, 0 after a clean shutdown.
    """
    load_env_file()
    try:
        settings = get_settings()
    except ConfigError as e:
        configure_logging("INFO")
        logger.error("could not load configuration: %s", e)
        return 1

    configure_logging(settings.log_level)
    try:
        database = open_database(settings.db_driver, settings.database_url)
    except StorageError as e:
        logger.error("could not connect to database: %s", e)
        return 1

    app = create_app(database)
    logger.info("server running on port:%d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
