"""
Tests for ConversionService: validation first, then conversion, failures as values.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from roman_numeral.domains.numerals import (
    UNEXPECTED,
    ConversionFailure,
    ConversionResult,
    NumeralRangeError,
    ValidationErrorKind,
)
from roman_numeral.services import ConversionService, convert_query


@pytest.fixture
def service() -> ConversionService:
    return ConversionService()


def test_convert_trims_input(service: ConversionService) -> None:
    out = service.convert("  42  ")
    assert out == ConversionResult(input="42", output="XLII")
    assert out.to_dict() == {"input": "42", "output": "XLII"}


def test_convert_keeps_leading_zeros_in_input(service: ConversionService) -> None:
    assert service.convert("0042") == ConversionResult(input="0042", output="XLII")


@pytest.mark.parametrize(
    "raw, kind",
    [
        ("", ValidationErrorKind.MISSING_INPUT),
        ("abc", ValidationErrorKind.INVALID_NUMBER),
        ("0", ValidationErrorKind.OUT_OF_RANGE),
        ("4000", ValidationErrorKind.OUT_OF_RANGE),
        ("3.14", ValidationErrorKind.INVALID_CHARACTERS),
    ],
)
def test_convert_returns_validation_failure(service: ConversionService, raw: str, kind: ValidationErrorKind) -> None:
    out = service.convert(raw)
    assert isinstance(out, ConversionFailure)
    assert out.kind is kind
    assert out.message == kind.message
    assert out.is_validation_error
    assert out.error_type == kind.value


def test_validation_failure_skips_converter(service: ConversionService) -> None:
    with patch("roman_numeral.services.conversion_service.convert") as mock_convert:
        service.convert("abc")
    mock_convert.assert_not_called()


def test_converter_range_error_is_unexpected(service: ConversionService) -> None:
    """A converter rejection after validation passed is an internal failure."""
    with patch(
        "roman_numeral.services.conversion_service.convert",
        side_effect=NumeralRangeError(42),
    ):
        out = service.convert("42")
    assert isinstance(out, ConversionFailure)
    assert out.kind == UNEXPECTED
    assert not out.is_validation_error
    assert out.error_type == UNEXPECTED


def test_convert_is_idempotent(service: ConversionService) -> None:
    assert service.convert("1984") == service.convert("1984")
    assert convert_query("1984") == ConversionResult(input="1984", output="MCMLXXXIV")


@pytest.mark.parametrize("raw", ["9" * 5000, "-" + "9" * 5000, "+" + "1" * 4301])
def test_convert_very_long_numbers(service: ConversionService, raw: str) -> None:
    out = service.convert(raw)
    assert isinstance(out, ConversionFailure)
    assert out.kind is ValidationErrorKind.OUT_OF_RANGE
    assert out.is_validation_error


def test_convert_long_run_of_leading_zeros(service: ConversionService) -> None:
    raw = "0" * 5000 + "42"
    assert service.convert(raw) == ConversionResult(input=raw, output="XLII")
