"""Interface layer error handling.

Routes translate the errors they expect from their use case. Failures that
can surface from any route (the record store or the content repository being
unreachable) are translated here once.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from journal.adapter.error import ContentNotConfiguredError, ContentUnavailableError
from journal.domain.error import StoreUnavailableError


async def store_unavailable_handler(
    request: Request, exc: StoreUnavailableError
) -> JSONResponse:
    """Record store errors are retryable: 503."""
    logfire.error(
        "Record store unavailable",
        path=request.url.path,
        operation=exc.operation,
        error=str(exc),
    )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Comment store temporarily unavailable, please retry"},
    )


async def content_unavailable_handler(
    request: Request, exc: ContentUnavailableError
) -> JSONResponse:
    """Content repository errors are retryable: 503."""
    logfire.error("Content repository unavailable", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Failed to fetch posts"},
    )


async def content_not_configured_handler(
    request: Request, exc: ContentNotConfiguredError
) -> JSONResponse:
    """Missing GitHub configuration is a server fault: 500."""
    logfire.error("Content repository not configured", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "GitHub configuration missing"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach handlers for infrastructure failures shared by all routes.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(StoreUnavailableError, store_unavailable_handler)
    app.add_exception_handler(ContentUnavailableError, content_unavailable_handler)
    app.add_exception_handler(ContentNotConfiguredError, content_not_configured_handler)
