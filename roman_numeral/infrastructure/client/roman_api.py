"""
HTTP client for the conversion API. Used by the Streamlit UI.
"""

from __future__ import annotations

from typing import Any, Optional

import requests

from roman_numeral.domains.numerals import ConversionResult
from roman_numeral.utils.config import api_base_url, api_timeout_seconds
from roman_numeral.utils.logger import get_logger

logger = get_logger()

CONNECTION_ERROR_MESSAGE = (
    "Unable to connect to the server. Please check your connection and try again."
)
GENERIC_ERROR_MESSAGE = "An error occurred during conversion"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again."


class RomanApiError(RuntimeError):
    """Raised when the API call fails. `message` is safe to show to users."""

    def __init__(self, message: str, status_code: Optional[int] = None, original: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.original = original


def _error_message(resp: requests.Response) -> str:
    # Validation errors come back as text/plain; anything else gets a generic message.
    ctype = resp.headers.get("content-type", "")
    text = (resp.text or "").strip()
    if text and ctype.startswith("text/plain"):
        return text
    return GENERIC_ERROR_MESSAGE


def _parse_result(data: Any) -> ConversionResult:
    if not isinstance(data, dict) or "input" not in data or "output" not in data:
        raise ValueError(f"Unexpected response body: {data!r}")
    return ConversionResult(input=str(data["input"]), output=str(data["output"]))


class RomanApiClient:
    """Thin wrapper over GET /romannumeral."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None) -> None:
        self.base_url = (base_url or api_base_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else api_timeout_seconds()

    def convert(self, number: str) -> ConversionResult:
        """
        Convert `number` by calling the API.

        Raises:
            RomanApiError: On HTTP errors, connection problems or malformed responses.
        """
        url = f"{self.base_url}/romannumeral"
        try:
            resp = requests.get(url, params={"query": number}, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Roman API request failed: %s", e)
            raise RomanApiError(CONNECTION_ERROR_MESSAGE, original=e) from e

        if resp.status_code >= 400:
            msg = _error_message(resp)
            logger.info("Roman API returned %d: %s", resp.status_code, msg)
            raise RomanApiError(msg, status_code=resp.status_code)

        try:
            return _parse_result(resp.json())
        except ValueError as e:
            logger.exception("Roman API invalid response: %s", e)
            raise RomanApiError(UNEXPECTED_ERROR_MESSAGE, status_code=resp.status_code, original=e) from e
