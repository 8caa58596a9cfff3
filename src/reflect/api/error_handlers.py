"""Global exception handlers rendering the uniform error envelope.

- ReflectError -> its own status and stable message
- RequestValidationError -> 400 "Invalid request data: ..."
- HTTPException (unknown route, wrong method) -> envelope with its status
- Exception (catch-all) -> 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from reflect.errors import INVALID_REQUEST_PREFIX, InternalError, ReflectError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(ReflectError)
    async def reflect_error_handler(request: Request, exc: ReflectError):
        if exc.is_client_error:
            logger.warning(f"{exc.code} on {request.url.path}: {exc.message}")
        else:
            logger.error(
                f"{exc.code} on {request.url.path}: {getattr(exc, 'detail', '') or exc.message}"
            )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "message": _validation_message(exc)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        error = InternalError(f"{type(exc).__name__}: {exc}")
        logger.error(f"Unhandled exception on {request.url.path}: {error.detail}", exc_info=True)
        return JSONResponse(status_code=error.http_status, content=error.to_response())


def _validation_message(exc: RequestValidationError) -> str:
    """First validation error as "Invalid request data: <field>: <reason>"."""
    errors = exc.errors()
    if not errors:
        return INVALID_REQUEST_PREFIX
    first = errors[0]
    # drop the "body"/"query"/"path" location prefix
    location = [str(part) for part in first.get("loc", ())[1:]]
    field = ".".join(location) or "request"
    return f"{INVALID_REQUEST_PREFIX}: {field}: {first.get('msg', 'invalid value')}"
