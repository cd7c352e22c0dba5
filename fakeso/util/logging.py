"""Logging configuration for the application."""

import logging
import sys

from fakeso.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure standard logging for the application and its libraries.

    Application events go through logfire; this only sets levels and format
    for libraries that use the ``logging`` module (uvicorn, alembic, asyncpg).

    Args:
        settings: Application settings
    """
    if settings.debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # Query logging is handled by logfire instrumentation
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logging.getLogger("fakeso").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
