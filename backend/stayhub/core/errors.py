# stayhub/core/errors.py
"""
Booking domain errors.

Services raise these; `register_exception_handlers` turns them into JSON
responses so routers never build error bodies by hand.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class BookingError(Exception):
    """Base class for every error the booking core reports to a caller."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(BookingError):
    """Missing required fields or a malformed identifier."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class NotFoundError(BookingError):
    status_code = status.HTTP_404_NOT_FOUND


class PolicyError(BookingError):
    """Requested dates fall outside every advertised availability window."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(BookingError):
    """Requested dates overlap a booking already stored for the listing."""

    status_code = status.HTTP_409_CONFLICT


async def booking_error_handler(request: Request, exc: BookingError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "message": exc.message,
            "error": type(exc).__name__,
        },
    )


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": "Internal Server Error!"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookingError, booking_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)
