"""Exception handlers rendering every failure as ``{"error": message}``."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

REQUEST_SECTIONS = ("body", "path", "query", "header")


def format_validation_error(exc: RequestValidationError) -> str:
    """Turn the first validation error into a short client-facing message."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    error = errors[0]
    loc = [str(part) for part in error.get("loc", ())]
    if loc and loc[0] in REQUEST_SECTIONS:
        loc = loc[1:]
    field = ".".join(loc)
    error_type = error.get("type", "")
    message = error.get("msg", "Invalid value")

    if error_type == "json_invalid":
        return "Invalid JSON body"
    if not field:
        return "Request body is required" if error_type == "missing" else message
    if error_type == "missing":
        return f"{field} is required"
    if error_type == "string_too_short" and error.get("ctx", {}).get("min_length") == 1:
        return f"{field} is required"
    if error_type == "value_error":
        return message.removeprefix("Value error, ")
    return f"{field}: {message}"


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers for HTTP, validation and unexpected errors."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = format_validation_error(exc)
        logger.info(f"Rejected {request.method} {request.url.path}: {message}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": message},
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Server error"},
        )
