"""Roman numerals: numeral table, validator, converter, result types."""

from roman_numeral.domains.numerals.converter import NumeralRangeError, convert
from roman_numeral.domains.numerals.models import (
    UNEXPECTED,
    ConversionFailure,
    ConversionOutcome,
    ConversionResult,
)
from roman_numeral.domains.numerals.numeral_table import MAX_VALUE, MIN_VALUE, NUMERAL_TABLE
from roman_numeral.domains.numerals.validator import ValidationErrorKind, parse_leading_int, validate

__all__ = [
    "NUMERAL_TABLE",
    "MIN_VALUE",
    "MAX_VALUE",
    "ValidationErrorKind",
    "validate",
    "parse_leading_int",
    "convert",
    "NumeralRangeError",
    "ConversionResult",
    "ConversionFailure",
    "ConversionOutcome",
    "UNEXPECTED",
]
