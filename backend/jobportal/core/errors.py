# jobportal/core/errors.py
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

BAD_REQUEST = "Bad Request"
UNAUTHORIZED = "Unauthorized"
INTERNAL_SERVER_ERROR = "Internal Server Error"


def error_body(message: str) -> dict[str, str]:
    return {"error": message}


def _message_from_detail(detail) -> str:
    if isinstance(detail, str) and detail:
        return detail
    if isinstance(detail, dict):
        msg = detail.get("error") or detail.get("message")
        if isinstance(msg, str) and msg:
            return msg
    return "Request failed"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    def http_exception_handler(request: Request, exc: StarletteHTTPException):  # noqa: ARG001
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(_message_from_detail(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.info(
            "Rejected request %s %s: %s",
            request.method,
            request.url.path,
            exc.errors(),
        )
        return JSONResponse(status_code=400, content=error_body(BAD_REQUEST))

    @app.exception_handler(Exception)
    def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content=error_body(INTERNAL_SERVER_ERROR))
