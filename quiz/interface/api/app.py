"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quiz.config import Settings
from quiz.interface.api.routes import auth, favourites, health, scores
from quiz.interface.error import register_error_handlers
from quiz.util.di.container import create_container, setup_di
from quiz.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it and passes a container with
    in-memory persistence.

    Args:
        container: DI container to use (defaults to the production container)
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Quiz API",
        description="Backend API for the quiz app - accounts, scores, diamonds and favourite questions",
        version=health.VERSION,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Credentials are sent as a bearer header, never cookies
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(scores.router)
    app_instance.include_router(favourites.router)

    register_error_handlers(app_instance)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
