"""
Lightweight request tracing.

Every request gets a TraceContext (trace id + span id) that is attached to
`request.state`, echoed back in the X-Trace-Id header and included in log
lines so one request can be followed across the application log.
"""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field, replace
from typing import Any, Optional

from roman_numeral.utils.logger import get_logger

logger = get_logger()

TRACE_HEADER = "X-Trace-Id"


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class TraceContext:
    trace_id: str
    span_id: str
    method: str
    url: str
    start_time: float = field(default_factory=time.perf_counter)
    user_agent: Optional[str] = None
    ip: Optional[str] = None

    def elapsed_ms(self) -> float:
        return (time.perf_counter() - self.start_time) * 1000.0


def create_trace_context(request: Any) -> TraceContext:
    """Build a trace context from a Starlette/FastAPI request."""
    client = getattr(request, "client", None)
    return TraceContext(
        trace_id=_new_id(),
        span_id=_new_id(),
        method=request.method,
        url=str(request.url.path) + (f"?{request.url.query}" if request.url.query else ""),
        user_agent=request.headers.get("user-agent"),
        ip=client.host if client else None,
    )


def child_span(parent: TraceContext, operation: str) -> TraceContext:
    """Derive a span for a nested operation. Keeps the parent's trace id."""
    ctx = replace(parent, span_id=_new_id(), start_time=time.perf_counter())
    logger.debug("[%s:%s] span %s started (parent %s)", ctx.trace_id, ctx.span_id, operation, parent.span_id)
    return ctx


def log_trace(ctx: TraceContext, message: str, level: str = "info") -> None:
    """Log message tagged with the trace/span ids and elapsed time."""
    log = getattr(logger, level, logger.info)
    log(
        "[%s:%s] %s - Duration: %.1fms (ip=%s ua=%s)",
        ctx.trace_id,
        ctx.span_id,
        message,
        ctx.elapsed_ms(),
        ctx.ip,
        ctx.user_agent,
    )


def get_trace_context(request: Any) -> Optional[TraceContext]:
    """Return the trace context attached by the tracing middleware, if any."""
    return getattr(request.state, "trace_context", None)


def trace_id_of(request: Any) -> Optional[str]:
    ctx = get_trace_context(request)
    return ctx.trace_id if ctx else None
