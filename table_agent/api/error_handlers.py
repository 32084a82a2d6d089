"""Error Handlers - last-resort handler for failures that escape a route.

Invariants:
    - Routes convert expected failures into their own envelopes
    - Anything else becomes a 500 {"error": {...}} envelope without internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from table_agent.core.errors import ErrorContext, LocalError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register the catch-all error handler on the FastAPI app."""

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        error = LocalError(
            "An unexpected error occurred",
            ErrorContext(operation=request.url.path),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error.to_response(),
        )
