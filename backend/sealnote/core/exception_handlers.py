"""
FastAPI exception handlers.

Every error leaves the API as `{"message": ...}` with the status code taken
from EXCEPTION_STATUS_MAP. Client errors are logged at warning, server errors
at error.
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from sealnote.core.exceptions import (
    ApplicationError,
    AuthError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from sealnote.core.logging import get_logger

logger = get_logger(__name__)

EXCEPTION_STATUS_MAP: dict[type[ApplicationError], int] = {
    ValidationError: 400,
    AuthError: 403,
    NotFoundError: 404,
    InternalError: 500,
}

MALFORMED_BODY_MESSAGE = "request body is malformed or contains unknown fields"
ENDPOINT_NOT_FOUND_MESSAGE = "API endpoint does not exist"


async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    status_code = EXCEPTION_STATUS_MAP.get(type(exc), 500)
    log_kw = {
        "code": exc.code,
        "status": status_code,
        "path": request.url.path,
        "method": request.method,
    }
    if status_code >= 500:
        logger.error("Server error", **log_kw)
    else:
        logger.warning("Client error", **log_kw)

    return JSONResponse(status_code=status_code, content={"message": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are reported like missing fields: 400, not FastAPI's 422."""
    errors = exc.errors()
    logger.warning(
        "Request validation failed",
        path=request.url.path,
        method=request.method,
        fields=[".".join(str(loc) for loc in err.get("loc", [])) for err in errors],
    )
    return JSONResponse(status_code=400, content={"message": MALFORMED_BODY_MESSAGE})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routing errors (unknown path, wrong method) in the same body shape as everything else."""
    message = ENDPOINT_NOT_FOUND_MESSAGE if exc.status_code == 404 else str(exc.detail)
    logger.warning("HTTP error", status=exc.status_code, path=request.url.path, method=request.method)
    return JSONResponse(status_code=exc.status_code, content={"message": message}, headers=exc.headers)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
        exception_type=type(exc).__name__,
    )
    return JSONResponse(status_code=500, content={"message": "An unexpected error occurred"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
