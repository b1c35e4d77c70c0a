"""Stdlib logging setup.

Interface-layer modules log through ``logging.getLogger(__name__)``. Records
go to stdout and are also forwarded to Logfire so they land next to the
request spans.
"""

import logging
import sys

import logfire

from quiz.config import Settings

# Libraries that are chatty at INFO
NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "asyncio")


def level_for(settings: Settings) -> int:
    """Pick the log level for the environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure application logging.

    Args:
        settings: Application settings
    """
    level = level_for(settings)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logfire.LogfireLoggingHandler(),
        ],
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("quiz").setLevel(level)

    logging.getLogger(__name__).info(
        f"Logging configured: environment={settings.environment}, "
        f"level={logging.getLevelName(level)}"
    )
