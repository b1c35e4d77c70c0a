#!/usr/bin/env python3
"""Start the FastAPI application with Logfire error tracking for startup errors."""

import sys

import logfire
import uvicorn
from pydantic import ValidationError

from quiz.config import Settings
from quiz.util.error import ConfigurationError
from quiz.util.logging import setup_logging
from quiz.util.observability import configure_logfire


def load_settings() -> Settings:
    """Load settings, turning invalid values into a ConfigurationError."""
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError.from_validation_error(e) from e


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = load_settings()

    # Configure Logfire early to catch startup errors
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info(
            "Starting FastAPI application",
            host=settings.host,
            port=settings.port,
            git_sha=settings.git_sha,
        )

        # Importing the app builds the production container
        uvicorn.run(
            "quiz.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
