"""Streamlit UI helpers for the converter form and its result."""

from __future__ import annotations

import re
from typing import Optional

import streamlit as st

from roman_numeral.domains.numerals import MAX_VALUE, MIN_VALUE, ConversionResult, parse_leading_int
from roman_numeral.infrastructure.client.roman_api import RomanApiClient, RomanApiError
from roman_numeral.utils.logger import get_logger

logger = get_logger()

INPUT_HINT = f"Integer between {MIN_VALUE} and {MAX_VALUE}"
INVALID_INPUT_MESSAGE = f"Please enter an integer between {MIN_VALUE} and {MAX_VALUE}"

_DIGITS = re.compile(r"[0-9]+")


def is_valid_input(value: str) -> bool:
    """Client-side check: digit string in range. The API validates again."""
    value = (value or "").strip()
    if not _DIGITS.fullmatch(value):
        return False
    return MIN_VALUE <= parse_leading_int(value) <= MAX_VALUE


def run_conversion(
    client: RomanApiClient, value: str
) -> tuple[Optional[ConversionResult], Optional[str]]:
    """
    Validate and convert `value` via the API.

    Returns (result, None) on success or (None, error_message) on failure.
    """
    value = (value or "").strip()
    if not is_valid_input(value):
        return None, INVALID_INPUT_MESSAGE
    try:
        return client.convert(value), None
    except RomanApiError as e:
        return None, e.message or "An error occurred during conversion"


def _clear_feedback() -> None:
    st.session_state.roman_result = None
    st.session_state.roman_error = None


def render_converter(client: RomanApiClient) -> None:
    """Render the input form, then the last result or error."""
    if "roman_result" not in st.session_state:
        st.session_state.roman_result = None
    if "roman_error" not in st.session_state:
        st.session_state.roman_error = None

    st.subheader("Enter a Number")
    with st.form("roman_form", clear_on_submit=False):
        value = st.text_input("Number", help=INPUT_HINT, placeholder=INPUT_HINT)
        submitted = st.form_submit_button("Convert to roman numeral", type="primary")

    if submitted:
        _clear_feedback()
        if not (value or "").strip():
            st.session_state.roman_error = INVALID_INPUT_MESSAGE
        else:
            with st.spinner("Converting..."):
                result, error = run_conversion(client, value)
            st.session_state.roman_result = result
            st.session_state.roman_error = error
            if error:
                logger.info("Conversion failed for %r: %s", value, error)

    if st.session_state.roman_error:
        st.error(f"**Error**\n\n{st.session_state.roman_error}")

    result = st.session_state.roman_result
    if result:
        st.info(f"**Input:** {result.input}\n\n**Roman Numeral:** {result.output}")
