"""
Input classification for the conversion endpoint.

Raw query text is checked against an ordered sequence of predicates. The
first predicate that matches decides the error kind, so the order below is
part of the contract: "3.14" parses to 3 (in range) and is only caught by the
final digit-only check, while "-5" is reported as out of range.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable

from roman_numeral.domains.numerals.numeral_table import MAX_VALUE, MIN_VALUE

# Optional sign followed by ASCII digits; anything after the digits is ignored.
_LEADING_INT = re.compile(r"[+-]?[0-9]+")
_DIGITS_ONLY = re.compile(r"[0-9]+")
_MAX_DIGITS = len(str(MAX_VALUE))


class ValidationErrorKind(str, Enum):
    """Reasons a raw input cannot be converted."""

    MISSING_INPUT = "MISSING_INPUT"
    INVALID_NUMBER = "INVALID_NUMBER"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    INVALID_CHARACTERS = "INVALID_CHARACTERS"

    @property
    def message(self) -> str:
        """Fixed human-readable message returned to clients."""
        return _MESSAGES[self]


_MESSAGES: dict[ValidationErrorKind, str] = {
    ValidationErrorKind.MISSING_INPUT: "Input is required",
    ValidationErrorKind.INVALID_NUMBER: "Input must be a valid integer",
    ValidationErrorKind.OUT_OF_RANGE: f"Input must be between {MIN_VALUE} and {MAX_VALUE}",
    ValidationErrorKind.INVALID_CHARACTERS: "Input must be a valid integer",
}


def parse_leading_int(text: str) -> int | None:
    """
    Parse the integer prefix of text, tolerating a leading sign.

    Returns None when text does not start with an (optionally signed) digit.
    "42abc" -> 42, "3.14" -> 3, "-5" -> -5, "abc" -> None. Digit runs wider
    than MAX_VALUE come back as MAX_VALUE + 1 with their sign.
    """
    m = _LEADING_INT.match(text.strip())
    if not m:
        return None
    token = m.group(0)
    sign = -1 if token.startswith("-") else 1
    digits = token.lstrip("+-").lstrip("0") or "0"
    # Wider than MAX_VALUE means out of range; int() also refuses very long digit runs.
    if len(digits) > _MAX_DIGITS:
        return sign * (MAX_VALUE + 1)
    return sign * int(digits)


def _is_blank(text: str) -> bool:
    return not text


def _has_no_number(text: str) -> bool:
    return parse_leading_int(text) is None


def _is_out_of_range(text: str) -> bool:
    n = parse_leading_int(text)
    return n is None or n < MIN_VALUE or n > MAX_VALUE


def _has_non_digits(text: str) -> bool:
    return _DIGITS_ONLY.fullmatch(text) is None


# Evaluated top to bottom against the trimmed input.
_CHECKS: tuple[tuple[ValidationErrorKind, Callable[[str], bool]], ...] = (
    (ValidationErrorKind.MISSING_INPUT, _is_blank),
    (ValidationErrorKind.INVALID_NUMBER, _has_no_number),
    (ValidationErrorKind.OUT_OF_RANGE, _is_out_of_range),
    (ValidationErrorKind.INVALID_CHARACTERS, _has_non_digits),
)


def validate(raw: str | None) -> ValidationErrorKind | None:
    """
    Classify raw input.

    Returns None when the trimmed input is a pure digit string in [1, 3999],
    otherwise the first matching ValidationErrorKind.
    """
    text = (raw or "").strip()
    for kind, check in _CHECKS:
        if check(text):
            return kind
    return None
