"""API client for the conversion endpoint."""

from roman_numeral.infrastructure.client.roman_api import RomanApiClient, RomanApiError

__all__ = ["RomanApiClient", "RomanApiError"]
