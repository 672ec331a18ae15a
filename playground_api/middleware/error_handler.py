"""Global exception handlers for the API."""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from playground_api.services.profile_store import (
    DuplicateEmailError,
    InvalidProfileError,
    ProfileNotFoundError,
    ProfileStoreError,
)

logger = structlog.get_logger()


class APIError(Exception):
    """Base exception for API errors."""

    def __init__(
        self,
        message: str,
        code: str = "API_ERROR",
        status_code: int = 400,
        details: dict = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class NotFoundError(APIError):
    """Resource not found."""

    def __init__(self, resource: str, identifier: str | int = None):
        super().__init__(
            message=f"{resource} not found",
            code="NOT_FOUND",
            status_code=404,
            details={"resource": resource, "id": identifier} if identifier is not None else {},
        )


class ValidationAPIError(APIError):
    """Validation error."""

    def __init__(self, message: str, field: str = None):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            status_code=400,
            details={"field": field} if field else {},
        )


class ConflictError(APIError):
    """Request conflicts with existing data."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="CONFLICT",
            status_code=409,
        )


def error_response(status_code: int, message: str, code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": message, "code": code},
    )


def to_api_error(exc: ProfileStoreError) -> APIError:
    """Translate a store signal into its HTTP-facing error."""
    if isinstance(exc, ProfileNotFoundError):
        return NotFoundError("Profile", exc.profile_id)
    if isinstance(exc, DuplicateEmailError):
        return ConflictError("Email already exists")
    if isinstance(exc, InvalidProfileError):
        return ValidationAPIError(str(exc))
    return APIError(str(exc), code="STORE_ERROR", status_code=500)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
        """Handle custom API errors."""
        logger.warning(
            "API error",
            code=exc.code,
            message=exc.message,
            details=exc.details,
            path=request.url.path,
        )
        return error_response(exc.status_code, exc.message, exc.code)

    @app.exception_handler(ProfileStoreError)
    async def store_error_handler(request: Request, exc: ProfileStoreError) -> JSONResponse:
        """Handle signals raised by the profile store."""
        return await api_error_handler(request, to_api_error(exc))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Handle request body, query and path validation errors."""
        errors = exc.errors()
        first_error = errors[0] if errors else {}
        field = ".".join(str(loc) for loc in first_error.get("loc", []))
        message = first_error.get("msg", "Validation error")

        logger.warning(
            "Validation error",
            field=field,
            message=message,
            path=request.url.path,
        )
        return error_response(400, f"{field}: {message}" if field else message, "VALIDATION_ERROR")

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Unmatched routes and methods fall through to a generic 404."""
        if exc.status_code in (404, 405):
            return error_response(404, "Endpoint not found", "NOT_FOUND")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail, "code": "HTTP_ERROR"},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        """Handle database errors."""
        logger.error(
            "Database error",
            error=str(exc),
            path=request.url.path,
        )
        return error_response(500, "A database error occurred", "DATABASE_ERROR")

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected errors."""
        logger.exception(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
        )
        return error_response(500, "An unexpected error occurred", "INTERNAL_ERROR")
