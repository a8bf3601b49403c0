"""Observability: metrics registry and request tracing."""
