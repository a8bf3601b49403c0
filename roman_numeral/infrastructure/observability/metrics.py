"""
Prometheus metrics for the conversion API.

All metrics live in a dedicated CollectorRegistry so tests can swap in a fresh
one with reset_metrics(). Callers reach the metrics through this module
(`metrics.request_counter`, ...) so they always see the current registry.
"""

from __future__ import annotations

from typing import Optional

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)

CONTENT_TYPE = CONTENT_TYPE_LATEST

registry: CollectorRegistry
request_counter: Counter
request_duration: Histogram
error_counter: Counter
active_requests: Gauge
conversion_success_counter: Counter
conversion_failure_counter: Counter
input_value_histogram: Histogram


def reset_metrics() -> None:
    """Replace the registry and every metric with fresh, zeroed instances."""
    global registry, request_counter, request_duration, error_counter, active_requests
    global conversion_success_counter, conversion_failure_counter, input_value_histogram

    registry = CollectorRegistry()
    request_counter = Counter(
        "roman_numeral_requests_total",
        "Total number of Roman numeral conversion requests",
        ["method", "endpoint", "status"],
        registry=registry,
    )
    request_duration = Histogram(
        "roman_numeral_request_duration_seconds",
        "Duration of Roman numeral conversion requests in seconds",
        ["method", "endpoint"],
        buckets=(0.1, 0.5, 1, 2, 5),
        registry=registry,
    )
    error_counter = Counter(
        "roman_numeral_errors_total",
        "Total number of errors in Roman numeral conversion",
        ["error_type", "endpoint"],
        registry=registry,
    )
    active_requests = Gauge(
        "roman_numeral_active_requests",
        "Number of currently active requests",
        registry=registry,
    )
    conversion_success_counter = Counter(
        "roman_numeral_conversions_success_total",
        "Total number of successful Roman numeral conversions",
        registry=registry,
    )
    conversion_failure_counter = Counter(
        "roman_numeral_conversions_failure_total",
        "Total number of failed Roman numeral conversions",
        ["error_type"],
        registry=registry,
    )
    input_value_histogram = Histogram(
        "roman_numeral_input_values",
        "Distribution of input values for Roman numeral conversion",
        buckets=(1, 10, 50, 100, 500, 1000, 2000, 3999),
        registry=registry,
    )


def get_metrics() -> str:
    """Current metrics in Prometheus text format."""
    return generate_latest(registry).decode("utf-8")


def sample_value(name: str, labels: Optional[dict[str, str]] = None) -> float:
    """Value of one sample (e.g. "roman_numeral_input_values_count"); 0.0 if not yet recorded."""
    value = registry.get_sample_value(name, labels or {})
    return value if value is not None else 0.0


reset_metrics()
