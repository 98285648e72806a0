"""
Error signaling and rendering.

Services raise `ApiError` (or a subclass) for domain conditions; everything
reaching the client is rendered by the handlers registered here as:

    {"error": {"message": "...", "status": 404}}
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class BadRequestError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


def error_body(message: str, status_code: int) -> dict:
    return {"error": {"message": message, "status": status_code}}


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error_body(message, status_code))


def _validation_message(exc: RequestValidationError) -> str:
    parts: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = str(err.get("msg") or "Invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request."


async def handle_api_error(_: Request, exc: ApiError) -> JSONResponse:
    return error_response(exc.message, exc.status_code)


async def handle_http_exception(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(str(exc.detail), exc.status_code)


async def handle_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(_validation_message(exc), 422)


async def handle_database_error(request: Request, exc: asyncpg.PostgresError) -> JSONResponse:
    # Constraint violations surface as-is; there is no domain translation.
    logger.exception("database_error method=%s path=%s", request.method, request.url.path)
    return error_response(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error method=%s path=%s", request.method, request.url.path)
    return error_response("Internal Server Error", status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, handle_api_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(asyncpg.PostgresError, handle_database_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
