from __future__ import annotations

import logging
import uuid

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ghash.api.router import api_router
from ghash.core.errors import APIError, GeohashError, make_error_payload
from ghash.core.settings import get_settings


logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()

    logging.getLogger("ghash").setLevel(settings.log_level.upper())

    app = FastAPI(title="ghash API")

    def _with_trace_id_header(
        headers: dict[str, str] | None, trace_id: str | None
    ) -> dict[str, str] | None:
        """Return headers merged with X-Trace-Id when trace_id is present."""

        if not trace_id:
            return headers
        merged: dict[str, str] = dict(headers or {})
        merged["X-Trace-Id"] = trace_id
        return merged

    def _error_response(
        request, *, status_code: int, code: str, message: str, details=None
    ) -> JSONResponse:
        trace_id = getattr(request.state, "trace_id", None)
        return JSONResponse(
            status_code=status_code,
            headers=_with_trace_id_header(None, trace_id),
            content=make_error_payload(
                code=code,
                message=message,
                trace_id=trace_id,
                details=details,
            ),
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_allow_origin],
        allow_methods=["GET"],
        allow_headers=["Content-Type", "X-Trace-Id"],
    )

    @app.middleware("http")
    async def _trace_id_middleware(request, call_next):
        trace_id = request.headers.get("X-Trace-Id") or str(uuid.uuid4())
        request.state.trace_id = trace_id
        response = await call_next(request)
        response.headers["X-Trace-Id"] = trace_id
        return response

    @app.exception_handler(APIError)
    async def _api_error_handler(request, exc: APIError):
        return _error_response(
            request,
            status_code=exc.status_code,
            code=exc.code,
            message=exc.message,
            details=exc.details,
        )

    @app.exception_handler(GeohashError)
    async def _geohash_error_handler(request, exc: GeohashError):
        return _error_response(request, status_code=400, code=exc.code, message=str(exc))

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request, exc: RequestValidationError):
        return _error_response(
            request,
            status_code=422,
            code="VALIDATION_ERROR",
            message="Request validation failed",
            details=exc.errors(),
        )

    @app.exception_handler(StarletteHTTPException)
    async def _http_error_handler(request, exc: StarletteHTTPException):
        return _error_response(
            request,
            status_code=exc.status_code,
            code="HTTP_ERROR",
            message=exc.detail if isinstance(exc.detail, str) else "HTTP error",
        )

    @app.exception_handler(Exception)
    async def _unhandled_error_handler(request, exc: Exception):
        trace_id = getattr(request.state, "trace_id", None)
        method = getattr(request, "method", None)
        path = getattr(getattr(request, "url", None), "path", None)
        logger.error(
            "Unhandled exception (trace_id=%s method=%s path=%s)",
            trace_id,
            method,
            path,
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        return _error_response(
            request,
            status_code=500,
            code="INTERNAL_ERROR",
            message="Internal error",
        )

    app.include_router(api_router)

    return app


app = create_app()
