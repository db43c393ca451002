# ticket_system/core/errors.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Failure raised by a service or repository; surfaces as a 500."""


class NotFoundError(ServiceError):
    pass


class StorageError(ServiceError):
    pass


class ApiError(Exception):
    """Failure with an explicit HTTP status, raised by routes and guards."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        if status_code is not None:
            self.status_code = status_code
        self.message = message
        self.headers = headers
        super().__init__(message)


class AuthenticationError(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str) -> None:
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class AuthorizationError(ApiError):
    status_code = status.HTTP_403_FORBIDDEN


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


async def api_error_handler(_: Request, exc: ApiError) -> JSONResponse:
    return error_response(exc.status_code, exc.message, exc.headers)


async def service_error_handler(_: Request, exc: ServiceError) -> JSONResponse:
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    request.app.state.metrics.error("invalid_input")
    return error_response(status.HTTP_400_BAD_REQUEST, _describe_validation_errors(exc))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
