"""
Exception handlers that turn errors into JSON responses.

Every error body has the same shape: {"message", "statusCode", "error"}.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shortener_app.errors import InvalidArgumentError
from shortener_app.schemas.url import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, error: str) -> JSONResponse:
    body = ErrorResponse(message=message, status_code=status_code, error=error)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed or missing request fields are a 400, not FastAPI's default 422"""
    errors = exc.errors()
    detail = "; ".join(str(err.get("msg", "")) for err in errors) or "Invalid request."
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, detail)
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid argument provided.", detail)


async def invalid_argument_handler(request: Request, exc: InvalidArgumentError) -> JSONResponse:
    logger.warning("Invalid argument on %s: %s", request.url.path, exc)
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid argument provided.", str(exc))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), str(exc.detail))


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred.",
        str(exc),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(InvalidArgumentError, invalid_argument_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
