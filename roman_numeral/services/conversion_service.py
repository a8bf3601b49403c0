"""
Conversion service: validate raw query text, then convert it.

Failures are returned as values, never raised, so callers can map each kind
to a transport status without inspecting exception types.
"""

from __future__ import annotations

from roman_numeral.domains.numerals import (
    ConversionFailure,
    ConversionOutcome,
    ConversionResult,
    NumeralRangeError,
    convert,
    parse_leading_int,
    validate,
)


class ConversionService:
    """Stateless orchestration of validate() and convert()."""

    def convert(self, raw: str | None) -> ConversionOutcome:
        """
        Convert raw query text to a Roman numeral.

        Returns ConversionResult on success. Returns ConversionFailure with the
        first matching validation kind, or with kind UNEXPECTED if the converter
        rejects a value that passed validation.
        """
        kind = validate(raw)
        if kind is not None:
            return ConversionFailure.from_kind(kind)

        text = (raw or "").strip()
        try:
            numeral = convert(parse_leading_int(text))
        except NumeralRangeError as e:
            return ConversionFailure.unexpected(str(e))
        return ConversionResult(input=text, output=numeral)


def convert_query(raw: str | None) -> ConversionOutcome:
    """Module-level shortcut for ConversionService().convert(raw)."""
    return ConversionService().convert(raw)
