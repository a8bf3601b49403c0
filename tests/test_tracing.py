"""
Tests for trace contexts and child spans.
"""

from __future__ import annotations

from types import SimpleNamespace

from roman_numeral.infrastructure.observability.tracing import (
    child_span,
    create_trace_context,
    get_trace_context,
)


def _request(query: str = "query=42") -> SimpleNamespace:
    return SimpleNamespace(
        method="GET",
        url=SimpleNamespace(path="/romannumeral", query=query),
        headers={"user-agent": "pytest"},
        client=SimpleNamespace(host="127.0.0.1"),
        state=SimpleNamespace(),
    )


def test_create_trace_context() -> None:
    ctx = create_trace_context(_request())
    assert ctx.method == "GET"
    assert ctx.url == "/romannumeral?query=42"
    assert ctx.user_agent == "pytest"
    assert ctx.ip == "127.0.0.1"
    assert len(ctx.trace_id) == 32
    assert ctx.trace_id != ctx.span_id
    assert ctx.elapsed_ms() >= 0


def test_create_trace_context_without_query() -> None:
    assert create_trace_context(_request(query="")).url == "/romannumeral"


def test_child_span_keeps_trace_id() -> None:
    parent = create_trace_context(_request())
    child = child_span(parent, "convert")
    assert child.trace_id == parent.trace_id
    assert child.span_id != parent.span_id
    assert child.url == parent.url


def test_get_trace_context() -> None:
    req = _request()
    assert get_trace_context(req) is None
    ctx = create_trace_context(req)
    req.state.trace_context = ctx
    assert get_trace_context(req) is ctx
