"""Observability configuration using Logfire.

Usage:
    import logfire

    # Structured logging
    logfire.info("Score saved", user_id=str(user_id), diamonds_earned=15)

    # Manual spans for critical operations
    with logfire.span("score_service.submit_score", user_id=str(user_id)):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from quiz.config import Settings

SERVICE_NAME = "quiz-backend"

# Attribute names whose values never leave the process
SCRUB_PATTERNS = ["password_hash", "token", "authorization"]


def should_send(settings: Settings) -> bool:
    """Decide whether telemetry goes to Logfire cloud.

    An explicit ``send_to_logfire`` wins; otherwise send only when a token is set.
    """
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Token Configuration:
    - Set OBSERVABILITY__LOGFIRE_TOKEN environment variable to enable cloud sending
    - Can be explicitly controlled with OBSERVABILITY__SEND_TO_LOGFIRE

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send(settings)

    config_kwargs = {
        "service_name": SERVICE_NAME,
        "service_version": settings.git_sha,
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "scrubbing": logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
        "console": False
        if settings.environment == "test"
        else logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by the app.

    Headers are left out of spans since ``Authorization`` carries the
    bearer token.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        result = {**attributes, "method": request.method, "path": request.url.path}
        if request.client:
            result["client_host"] = request.client.host
        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_map_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement issued through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.debug("SQLAlchemy instrumented")
