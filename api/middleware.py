"""FastAPI middleware and error handlers."""
import time
import uuid
from typing import Callable

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from logging_config import get_logger, bind_context, clear_context
from exceptions import (
    LoadBoardException,
    InvalidStateTransition,
    LoadNotFoundError,
    PermissionDeniedError,
    PersistenceError,
    SubDriverNotFoundError,
    TruckNotFoundError,
    UserNotFoundError,
    ValidationError,
)

logger = get_logger(__name__)

# Most specific class first; LoadAlreadyTaken falls under InvalidStateTransition
ERROR_STATUS_CODES = [
    (ValidationError, 400),
    (PermissionDeniedError, 403),
    (LoadNotFoundError, 404),
    (TruckNotFoundError, 404),
    (SubDriverNotFoundError, 404),
    (UserNotFoundError, 404),
    (InvalidStateTransition, 409),
    (PersistenceError, 503),
]


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware to log all API requests and responses.

    Adds request ID to all logs and tracks request duration.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable
    ) -> Response:
        """
        Process request and log details.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/endpoint handler

        Returns:
            HTTP response
        """
        request_id = str(uuid.uuid4())

        bind_context(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        logger.info("Request started", query=str(request.query_params) or None)

        start_time = time.time()

        try:
            response = await call_next(request)

            duration_ms = (time.time() - start_time) * 1000
            response.headers["X-Request-ID"] = request_id

            logger.info(
                "Request completed",
                status_code=response.status_code,
                duration_ms=round(duration_ms, 2),
            )

            return response

        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000

            logger.error(
                "Request failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=round(duration_ms, 2),
                exc_info=True,
            )

            raise

        finally:
            clear_context()


def status_code_for(exc: LoadBoardException) -> int:
    """HTTP status for a core exception (400 when unmapped)."""
    for exc_type, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, exc_type):
            return status_code
    return 400


async def load_board_exception_handler(request: Request, exc: LoadBoardException) -> JSONResponse:
    """Convert core exceptions to JSON error responses."""
    status_code = status_code_for(exc)

    if status_code >= 500:
        logger.error("Storage error", error=str(exc), error_type=type(exc).__name__)
    else:
        logger.warning("Request rejected", error=str(exc), error_type=type(exc).__name__)

    return JSONResponse(
        status_code=status_code,
        content={
            "error": type(exc).__name__,
            "message": str(exc),
            "detail": getattr(exc, "status", None),
        },
    )


def setup_middleware(app: FastAPI) -> None:
    """
    Add middleware and exception handlers to the app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(LoadBoardException, load_board_exception_handler)
    app.add_middleware(RequestLoggingMiddleware)

    logger.info("Middleware configured")
