"""HTTP API (FastAPI)."""

from roman_numeral.infrastructure.http.api import create_app, failure_status

__all__ = ["create_app", "failure_status"]
