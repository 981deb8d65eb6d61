"""
Error Handlers
Custom exceptions and exception handlers for FastAPI.

Every error response has the shape ``{"error": "<message>"}``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .middleware.logging import get_request_id

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base exception for API errors."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[dict] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class InvalidRequestError(APIError):
    """Malformed or non-finite numeric input (id, threshold, categoryId)."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message=message, status_code=status.HTTP_400_BAD_REQUEST, details=details)


class ResourceNotFoundError(APIError):
    """Exception raised when the primary entity of a request is missing."""

    def __init__(self, resource: str, resource_id=None):
        super().__init__(
            message=f"{resource} not found",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"resource": resource, "id": resource_id},
        )


class EmptySearchCriteriaError(APIError):
    """Search request without any filter field."""

    def __init__(self):
        super().__init__(
            message="At least one search field is required",
            status_code=status.HTTP_400_BAD_REQUEST,
        )


class NoMatchesError(APIError):
    """Search request whose filters matched nothing."""

    def __init__(self, resources: str):
        super().__init__(
            message=f"No {resources} found",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"resource": resources},
        )


def setup_error_handlers(app: FastAPI) -> None:
    """
    Set up custom error handlers for the FastAPI app.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        """Handle custom API errors."""
        logger.info(
            f"API error: {exc.message}",
            extra={
                "status_code": exc.status_code,
                "details": exc.details,
                "path": request.url.path,
                "request_id": get_request_id(request),
            },
        )

        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Handle request validation errors."""
        logger.warning(
            f"Validation error: {exc}",
            extra={"path": request.url.path, "request_id": get_request_id(request)},
        )

        # Convert error details to JSON-serializable format
        errors = []
        for error in exc.errors():
            errors.append(
                {
                    "loc": list(error.get("loc", [])),
                    "msg": str(error.get("msg", "")),
                    "type": error.get("type", ""),
                }
            )

        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"error": "Request validation failed", "details": errors},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.error(
            f"Unexpected error: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "request_id": get_request_id(request)},
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An unexpected error occurred"},
        )
