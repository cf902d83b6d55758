"""Domain error taxonomy and the exception handlers that expose it over HTTP."""

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.daybook.core.logging import get_logger

logger = get_logger(__name__)


class DaybookError(Exception):
    """Base class for errors raised by the domain layer."""

    code = "error"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail()
        super().__init__(self.detail)

    @classmethod
    def default_detail(cls) -> str:
        return cls.__doc__.strip().splitlines()[0] if cls.__doc__ else cls.code


class Forbidden(DaybookError):
    """You do not have permission to perform this action."""

    code = "forbidden"
    status_code = status.HTTP_403_FORBIDDEN


class NotFound(DaybookError):
    """The requested resource was not found."""

    code = "not_found"
    status_code = status.HTTP_404_NOT_FOUND


class ValidationFailed(DaybookError):
    """The request violates a domain rule."""

    code = "validation_failed"
    status_code = 422


class InvalidDay(ValidationFailed):
    """Day number is outside the project's duration."""

    code = "invalid_day"


class InvalidDuration(ValidationFailed):
    """Duration is not one of the supported project lengths."""

    code = "invalid_duration"


class InvalidTitle(ValidationFailed):
    """Project title cannot be empty."""

    code = "invalid_title"


class EmptyEntry(ValidationFailed):
    """Entry text cannot be empty unless an image is attached."""

    code = "empty_entry"


class EmptyComment(ValidationFailed):
    """Comment cannot be empty."""

    code = "empty_comment"


class UsernameTaken(ValidationFailed):
    """That username is already taken."""

    code = "username_taken"


class InvalidReference(DaybookError):
    """Entry does not belong to the given project."""

    code = "invalid_reference"
    status_code = status.HTTP_409_CONFLICT


class StorageUnavailable(DaybookError):
    """Storage is temporarily unavailable, retry later."""

    code = "storage_unavailable"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    retry_after_seconds = 5


def _error_response(status_code: int, detail: str, code: str | None = None) -> JSONResponse:
    content: dict[str, str | None] = {
        "detail": detail,
        "request_id": correlation_id.get(),
    }
    if code is not None:
        content["code"] = code
    return JSONResponse(status_code=status_code, content=content)


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(DaybookError)
    async def daybook_error_handler(request: Request, exc: DaybookError) -> JSONResponse:
        response = _error_response(exc.status_code, exc.detail, exc.code)
        if isinstance(exc, StorageUnavailable):
            logger.warning("Storage unavailable", detail=exc.detail, path=request.url.path)
            response.headers["Retry-After"] = str(exc.retry_after_seconds)
        return response

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        response = _error_response(exc.status_code, exc.detail)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        response = _error_response(exc.status_code, exc.detail)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = correlation_id.get()
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=request_id,
            path=request.url.path,
        )
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
