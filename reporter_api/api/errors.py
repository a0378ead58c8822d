"""Exception handlers that render errors in the API envelope."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.exceptions import AppError
from ..core.logging import get_logger

logger = get_logger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        {"status": "error", "message": message}, status_code=status_code
    )


async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s: %s", request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message)


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = [
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
        for error in exc.errors()
    ]
    return error_response(400, "; ".join(details) or "Invalid request")


async def handle_http_error(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)


__all__ = ["error_response", "register_exception_handlers"]
