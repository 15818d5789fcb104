from __future__ import annotations

import logging
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from jobportal.core.config import settings
from jobportal.core.errors import INTERNAL_SERVER_ERROR, error_body
from jobportal.dependencies.request_context import TRACE_ID_KEY

logger = logging.getLogger(__name__)


def generate_trace_id(existing: str | None = None) -> str:
    if existing and existing.strip():
        return existing.strip()
    return uuid.uuid4().hex


def register_trace_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def trace_middleware(request: Request, call_next):
        """
        Attach a trace id to every request and log its outcome.

        An inbound trace header is reused so ids survive across services;
        otherwise a fresh one is minted. The id is echoed on the response,
        including the 500 returned when a handler raises.
        """
        trace_id = generate_trace_id(request.headers.get(settings.TRACE_ID_HEADER))
        setattr(request.state, TRACE_ID_KEY, trace_id)

        started = time.perf_counter()
        logger.info("trace_id=%s started %s %s", trace_id, request.method, request.url.path)

        try:
            response = await call_next(request)
        except Exception:
            logger.error(
                "trace_id=%s failed %s %s status=500 latency_ms=%.1f",
                trace_id,
                request.method,
                request.url.path,
                (time.perf_counter() - started) * 1000,
                exc_info=True,
            )
            response = JSONResponse(status_code=500, content=error_body(INTERNAL_SERVER_ERROR))
            response.headers[settings.TRACE_ID_HEADER] = trace_id
            return response

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "trace_id=%s completed %s %s status=%s latency_ms=%.1f",
            trace_id,
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        response.headers[settings.TRACE_ID_HEADER] = trace_id
        return response
