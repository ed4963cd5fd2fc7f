"""Logging configuration for the application."""

import logging
import sys

from scribe.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging (uvicorn, SQLAlchemy and friends).

    Application code logs through logfire; this sets the level and format
    for everything that still uses the standard ``logging`` module.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # Multipart parsing is chatty at DEBUG
    logging.getLogger("multipart").setLevel(logging.WARNING)
    logging.getLogger("python_multipart").setLevel(logging.WARNING)

    logging.getLogger("scribe").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured: environment={settings.environment}, level={logging.getLevelName(level)}"
    )
