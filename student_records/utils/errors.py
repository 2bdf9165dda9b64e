from typing import Dict, Optional

from fastapi import FastAPI, Request, status
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.exceptions import RequestValidationError
import traceback
from .logging import get_logger
from .responses import ResponseBuilder

logger = get_logger()


class FieldValidationError(Exception):
    """Raised when a student record fails one or more field rules."""

    def __init__(
        self,
        errors: Dict[str, str],
        message: str = "Student record validation failed",
        error_code: str = "VALIDATION_ERROR",
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.errors = errors


class StoreError(Exception):
    """Base exception for record store failures."""

    def __init__(self, message: str, error_code: str = "STORE_ERROR"):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class NotFoundError(StoreError):
    """No student record exists for the given identifier."""

    def __init__(
        self,
        message: str = "Student not found",
        error_code: str = "STUDENT_NOT_FOUND",
        student_id: Optional[int] = None,
    ):
        super().__init__(message, error_code)
        self.student_id = student_id


class ConnectivityError(StoreError):
    """The backing API or database could not be reached."""

    def __init__(
        self,
        message: str = "Student backend is unreachable",
        error_code: str = "BACKEND_UNAVAILABLE",
    ):
        super().__init__(message, error_code)


class PersistenceError(StoreError):
    """The backend was reached but rejected the operation."""

    def __init__(
        self,
        message: str = "Student record could not be saved",
        error_code: str = "PERSISTENCE_FAILED",
    ):
        super().__init__(message, error_code)


def format_field_errors(errors: Dict[str, str]):
    return [{"field": field, "message": message} for field, message in errors.items()]


def setup_error_handlers(app: FastAPI):
    """Setup custom error handlers."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.error(f"HTTP Exception: {exc.status_code} - {exc.detail}")
        return ResponseBuilder.error(
            request=request,
            message=str(exc.detail),
            error_code="HTTP_ERROR",
            status_code=exc.status_code,
        )

    """
    RequestValidationError covers malformed path and query parameters.
    Student bodies are checked by the validator and raise FieldValidationError.
    """

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        logger.error(f"Request Validation Error: {exc.errors()}")

        formatted_errors = []
        for error in exc.errors():
            field_path = " -> ".join(str(loc) for loc in error["loc"])
            formatted_errors.append(
                {
                    "field": field_path,
                    "message": error["msg"],
                    "type": error["type"],
                }
            )

        return ResponseBuilder.error(
            request=request,
            message="Request validation failed",
            errors=formatted_errors,
            error_code="REQUEST_VALIDATION_ERROR",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    @app.exception_handler(FieldValidationError)
    async def field_validation_exception_handler(
        request: Request, exc: FieldValidationError
    ):
        logger.warning(f"Student Validation Error: {exc.errors}")

        return ResponseBuilder.error(
            request=request,
            message=exc.message,
            errors=format_field_errors(exc.errors),
            error_code=exc.error_code,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    @app.exception_handler(NotFoundError)
    async def not_found_exception_handler(request: Request, exc: NotFoundError):
        logger.error(f"Not Found Error: {exc.message}")

        return ResponseBuilder.error(
            request=request,
            message=exc.message,
            error_code=exc.error_code,
            status_code=status.HTTP_404_NOT_FOUND,
            error_type="NOT_FOUND_ERROR",
        )

    @app.exception_handler(ConnectivityError)
    async def connectivity_exception_handler(request: Request, exc: ConnectivityError):
        logger.error(f"Connectivity Error: {exc.message}")

        return ResponseBuilder.error(
            request=request,
            message=exc.message,
            error_code=exc.error_code,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            error_type="CONNECTIVITY_ERROR",
        )

    @app.exception_handler(PersistenceError)
    async def persistence_exception_handler(request: Request, exc: PersistenceError):
        logger.error(f"Persistence Error: {exc.message}")

        return ResponseBuilder.error(
            request=request,
            message=exc.message,
            error_code=exc.error_code,
            status_code=status.HTTP_409_CONFLICT,
            error_type="PERSISTENCE_ERROR",
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle all other unhandled exceptions"""
        logger.error(f"Unhandled Exception: {str(exc)}")
        logger.error(f"Traceback: {traceback.format_exc()}")

        return ResponseBuilder.error(
            request=request,
            message="An internal server error occurred",
            error_code="INTERNAL_ERROR",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_type="INTERNAL_ERROR",
        )
