"""Interface layer error handling.

Every error response has the same JSON shape as a success response:
``{"success": false, "message": "..."}``.
"""

import logging

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def error_response(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Build a failure response."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
        headers=headers,
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render HTTPException (raised by routes or routing) as a failure response."""
    return error_response(exc.status_code, str(exc.detail), exc.headers)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request decoding errors as 400 instead of FastAPI's 422."""
    problems = []
    for err in exc.errors():
        # Drop the leading "body"/"path"/"query" marker
        location = ".".join(str(part) for part in err.get("loc", ())[1:])
        problems.append(f"{location}: {err['msg']}" if location else err["msg"])
    return error_response(status.HTTP_400_BAD_REQUEST, "; ".join(problems))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and hide their details from the caller."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    logfire.error(
        "Unhandled error",
        method=request.method,
        path=request.url.path,
        error_type=type(exc).__name__,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
