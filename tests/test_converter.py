"""
Tests for the numeral table and integer -> Roman numeral conversion.
"""

from __future__ import annotations

import pytest

from roman_numeral.domains.numerals import (
    MAX_VALUE,
    MIN_VALUE,
    NUMERAL_TABLE,
    NumeralRangeError,
    convert,
)
from roman_numeral.domains.numerals.numeral_table import NUMERAL_SYMBOLS

_SYMBOL_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def _roman_to_int(roman: str) -> int:
    """Standard subtractive parsing, used to check round trips."""
    total = 0
    for i, ch in enumerate(roman):
        v = _SYMBOL_VALUES[ch]
        if i + 1 < len(roman) and v < _SYMBOL_VALUES[roman[i + 1]]:
            total -= v
        else:
            total += v
    return total


def test_numeral_table_is_strictly_descending() -> None:
    """Table has the 13 canonical units, largest first."""
    values = [v for v, _ in NUMERAL_TABLE]
    assert len(NUMERAL_TABLE) == 13
    assert values == sorted(values, reverse=True)
    assert len(set(values)) == len(values)
    assert dict(NUMERAL_TABLE)[900] == "CM"
    assert dict(NUMERAL_TABLE)[4] == "IV"


def test_numeral_table_is_immutable() -> None:
    with pytest.raises(TypeError):
        NUMERAL_TABLE[0] = (2000, "MM")  # type: ignore[index]


def test_convert_basic_symbols() -> None:
    assert convert(1) == "I"
    assert convert(5) == "V"
    assert convert(10) == "X"
    assert convert(50) == "L"
    assert convert(100) == "C"
    assert convert(500) == "D"
    assert convert(1000) == "M"


def test_convert_subtractive_notation() -> None:
    assert convert(4) == "IV"
    assert convert(9) == "IX"
    assert convert(40) == "XL"
    assert convert(90) == "XC"
    assert convert(400) == "CD"
    assert convert(900) == "CM"


def test_convert_complex_numbers() -> None:
    assert convert(42) == "XLII"
    assert convert(1984) == "MCMLXXXIV"
    assert convert(2023) == "MMXXIII"
    assert convert(3999) == "MMMCMXCIX"


def test_convert_full_range_round_trips() -> None:
    """Every number in range uses only numeral symbols, is unique, and parses back."""
    seen: dict[str, int] = {}
    for n in range(MIN_VALUE, MAX_VALUE + 1):
        out = convert(n)
        assert set(out) <= NUMERAL_SYMBOLS, n
        assert out not in seen, (n, seen.get(out))
        seen[out] = n
        assert _roman_to_int(out) == n


@pytest.mark.parametrize("n", [0, -1, 4000, 10_000])
def test_convert_out_of_range_raises(n: int) -> None:
    with pytest.raises(NumeralRangeError, match="Number must be between 1 and 3999") as e:
        convert(n)
    assert e.value.number == n


def test_range_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        convert(0)


@pytest.mark.parametrize("bad", ["42", 4.0, None, True])
def test_convert_rejects_non_int(bad: object) -> None:
    with pytest.raises(TypeError):
        convert(bad)  # type: ignore[arg-type]
