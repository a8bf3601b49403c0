"""
FastAPI application exposing the conversion service.

Routes:
    GET /romannumeral?query={integer}  convert an integer to a Roman numeral
    GET /health                         liveness check
    GET /metrics                        Prometheus metrics
    GET /api                            service description
"""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from roman_numeral import __version__
from roman_numeral.domains.numerals import ConversionFailure, ConversionResult, parse_leading_int
from roman_numeral.infrastructure.observability import metrics
from roman_numeral.infrastructure.observability.tracing import (
    TRACE_HEADER,
    child_span,
    create_trace_context,
    get_trace_context,
    log_trace,
    trace_id_of,
)
from roman_numeral.services.conversion_service import ConversionService
from roman_numeral.utils.config import app_env
from roman_numeral.utils.logger import get_logger

logger = get_logger()

MISSING_QUERY_MESSAGE = "Missing query parameter"
INTERNAL_ERROR_MESSAGE = "Internal server error"
NOT_FOUND_MESSAGE = "Route not found"

_STARTED_AT = time.monotonic()


def failure_status(failure: ConversionFailure) -> int:
    """Validation kinds are client errors; anything else is a server error."""
    return 400 if failure.is_validation_error else 500


def create_app(service: Optional[ConversionService] = None, lifespan=None) -> FastAPI:
    """Build the API application. `service` can be injected for tests."""
    service = service or ConversionService()
    app = FastAPI(
        title="Roman Numeral Converter API",
        version=__version__,
        description="Convert integers between 1-3999 to Roman numerals",
        lifespan=lifespan,
    )

    @app.middleware("http")
    async def observe_requests(request: Request, call_next):
        ctx = create_trace_context(request)
        request.state.trace_context = ctx
        log_trace(ctx, f"Request started: {request.method} {ctx.url}", "debug")

        active = metrics.active_requests
        active.inc()
        start = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            response.headers[TRACE_HEADER] = ctx.trace_id
            return response
        finally:
            duration = time.perf_counter() - start
            endpoint = request.url.path
            metrics.request_counter.labels(method=request.method, endpoint=endpoint, status=str(status)).inc()
            metrics.request_duration.labels(method=request.method, endpoint=endpoint).observe(duration)
            active.dec()
            if status >= 400:
                error_type = "server_error" if status >= 500 else "client_error"
                metrics.error_counter.labels(error_type=error_type, endpoint=endpoint).inc()
            log_trace(ctx, f"Request completed: {request.method} {ctx.url} - Status: {status}")

    @app.get("/health")
    def health(request: Request) -> dict:
        logger.info("Health check requested trace_id=%s", trace_id_of(request))
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uptime": round(time.monotonic() - _STARTED_AT, 3),
            "environment": app_env(),
        }

    @app.get("/metrics")
    def get_metrics() -> Response:
        try:
            body = metrics.get_metrics()
        except Exception as e:
            logger.exception("Error getting metrics: %s", e)
            return PlainTextResponse("Error getting metrics", status_code=500)
        return Response(content=body, media_type=metrics.CONTENT_TYPE)

    @app.get("/romannumeral")
    def romannumeral(request: Request, query: Optional[str] = Query(default=None)) -> Response:
        trace_id = trace_id_of(request)
        logger.info(
            "Roman numeral conversion requested trace_id=%s query=%r ip=%s",
            trace_id,
            query,
            request.client.host if request.client else None,
        )

        if not query:
            logger.warning("Missing query parameter trace_id=%s", trace_id)
            return PlainTextResponse(MISSING_QUERY_MESSAGE, status_code=400)

        parent = get_trace_context(request)
        span = child_span(parent, "convert") if parent else None
        try:
            outcome = service.convert(query)
            if span:
                log_trace(span, "Conversion finished", "debug")
        except Exception as e:
            metrics.conversion_failure_counter.labels(error_type="UNKNOWN_ERROR").inc()
            logger.exception("Roman numeral conversion failed trace_id=%s query=%r: %s", trace_id, query, e)
            return PlainTextResponse(INTERNAL_ERROR_MESSAGE, status_code=500)

        if isinstance(outcome, ConversionFailure):
            metrics.conversion_failure_counter.labels(error_type=outcome.error_type).inc()
            status = failure_status(outcome)
            logger.error(
                "Roman numeral conversion failed trace_id=%s kind=%s error=%r query=%r",
                trace_id,
                outcome.error_type,
                outcome.message,
                query,
            )
            body = outcome.message if status == 400 else INTERNAL_ERROR_MESSAGE
            return PlainTextResponse(body, status_code=status)

        result: ConversionResult = outcome
        metrics.conversion_success_counter.inc()
        metrics.input_value_histogram.observe(parse_leading_int(result.input))
        logger.info(
            "Roman numeral conversion successful trace_id=%s input=%s output=%s",
            trace_id,
            result.input,
            result.output,
        )
        return JSONResponse(result.to_dict())

    @app.get("/api")
    def api_info() -> dict:
        return {
            "name": "Roman Numeral Converter API",
            "version": __version__,
            "description": "Convert integers between 1-3999 to Roman numerals",
            "endpoints": {
                "/romannumeral?query={integer}": "Convert integer to Roman numeral",
                "/health": "Health check",
                "/metrics": "Prometheus metrics",
            },
            "example": "/romannumeral?query=42",
        }

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> Response:
        if exc.status_code == 404:
            logger.warning(
                "Route not found method=%s url=%s trace_id=%s",
                request.method,
                request.url.path,
                trace_id_of(request),
            )
            return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=404)
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> Response:
        ctx = get_trace_context(request)
        logger.error(
            "Unhandled error trace_id=%s method=%s url=%s: %s",
            ctx.trace_id if ctx else None,
            request.method,
            request.url.path,
            exc,
            exc_info=exc,
        )
        return PlainTextResponse(INTERNAL_ERROR_MESSAGE, status_code=500)

    return app
