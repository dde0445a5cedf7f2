"""Domain errors and the exception handlers that render them with request_id."""

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.labnotebook.core.logging import get_logger

logger = get_logger(__name__)


class LabNotebookError(Exception):
    """Base class for errors raised by services."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class InvalidArgumentError(LabNotebookError):
    """Caller passed a value outside the operation's contract (bad page, query...)."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(LabNotebookError):
    """A referenced team, user, project or repository does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ForbiddenError(LabNotebookError):
    """The principal may not perform a mutation.

    Search operations never raise this; they return empty results instead.
    """

    status_code = status.HTTP_403_FORBIDDEN


class ConflictError(LabNotebookError):
    """Uniqueness or quota violation."""

    status_code = status.HTTP_409_CONFLICT


def _error_response(status_code: int, detail: object) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": detail,
            "request_id": correlation_id.get(),
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(LabNotebookError)
    async def domain_exception_handler(request: Request, exc: LabNotebookError) -> JSONResponse:
        logger.info(
            "Request rejected",
            error=type(exc).__name__,
            detail=exc.detail,
            path=request.url.path,
        )
        return _error_response(exc.status_code, exc.detail)

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return _error_response(exc.status_code, exc.detail)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return _error_response(exc.status_code, exc.detail)

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
