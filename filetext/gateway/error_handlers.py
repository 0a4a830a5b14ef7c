"""
Error Handlers

Centralized error handling and response formatting.
"""
import traceback
from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse

from ..api.dto import ErrorResponseDTO
from ..api.exceptions import handle_extractor_exception
from ..core.config import ENVIRONMENT
from ..core.exceptions import ExtractorError
from ..core.logging_config import get_logger

logger = get_logger(__name__)


def _request_id(request: Request):
    return getattr(request.state, "request_id", None)


async def extractor_error_handler(request: Request, exc: ExtractorError) -> JSONResponse:
    """Map an ExtractorError to its HTTP status and a JSON error body."""
    http_exception = handle_extractor_exception(exc)
    logger.warning(
        f"Extraction error for {request.method} {request.url.path}: {http_exception.detail} "
        f"(status {http_exception.status_code}, operation: {exc.operation or 'n/a'})"
    )
    body = ErrorResponseDTO(
        error=http_exception.detail,
        status_code=http_exception.status_code,
        file_type=exc.file_type or None,
        operation=exc.operation or None,
        path=request.url.path,
        request_id=_request_id(request),
    )
    return JSONResponse(status_code=http_exception.status_code, content=body.model_dump())


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    logger.debug(f"HTTP exception for {request.method} {request.url.path}: {exc.status_code} - {exc.detail}")
    body = ErrorResponseDTO(
        error=str(exc.detail),
        status_code=exc.status_code,
        path=request.url.path,
        request_id=_request_id(request),
    )
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"Validation error for {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "Validation Error",
            "detail": jsonable_errors(exc),
            "status_code": status.HTTP_422_UNPROCESSABLE_ENTITY,
            "path": request.url.path,
            "request_id": _request_id(request)
        }
    )


async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler; details are only exposed outside production."""
    is_development = ENVIRONMENT != "production"
    logger.error(f"Unexpected error for {request.method} {request.url.path}: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": str(exc) if is_development else "Internal server error",
            "status_code": 500,
            "path": request.url.path,
            "request_id": _request_id(request),
            "traceback": "".join(traceback.format_exception(exc)) if is_development else None
        }
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    # Pydantic error contexts may hold exception objects
    return [
        {key: value for key, value in error.items() if key in ("loc", "msg", "type")}
        for error in exc.errors()
    ]


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all error handlers to the application."""
    app.add_exception_handler(ExtractorError, extractor_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)
