"""Error handlers: unmatched routes, record validation and uncaught errors.

Every response produced here is plain text. Handled failures that have an
inline ``{"error": ...}`` body never reach these handlers.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.errors import NotFoundError, RecordValidationError, ServiceError
from utils.logger import setup_logger

logger = setup_logger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_not_found_handler(app)
    _register_validation_error_handlers(app)
    _register_service_error_handler(app)
    _register_generic_error_handler(app)


def error_response(exc: ServiceError) -> PlainTextResponse:
    """Answer with the error's status (default 500) and message."""
    return PlainTextResponse(exc.message, status_code=exc.status)


def _register_not_found_handler(app: FastAPI) -> None:
    """Requests that match no route become a 404 "not found"."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # A path served only under another method counts as unmatched
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            logger.info(f"No route for {request.method} {request.url.path}")
            return error_response(NotFoundError())
        return error_response(ServiceError(str(exc.detail), status=exc.status_code))


def _register_validation_error_handlers(app: FastAPI) -> None:
    """Validation failures answer 400 with the first reported message."""

    @app.exception_handler(RecordValidationError)
    async def record_validation_handler(request: Request, exc: RecordValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors}")
        return PlainTextResponse(exc.first_message, status_code=exc.status)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return error_response(RecordValidationError.from_error_list(exc.errors()))


def _register_service_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        logger.error(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
        return error_response(exc)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return error_response(ServiceError())
