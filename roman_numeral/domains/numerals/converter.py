"""
Integer to Roman numeral conversion (greedy walk over NUMERAL_TABLE).
"""

from __future__ import annotations

from roman_numeral.domains.numerals.numeral_table import MAX_VALUE, MIN_VALUE, NUMERAL_TABLE


class NumeralRangeError(ValueError):
    """Raised when convert() is called directly with a number outside 1..3999."""

    def __init__(self, number: int) -> None:
        super().__init__(f"Number must be between {MIN_VALUE} and {MAX_VALUE}")
        self.number = number


def convert(n: int) -> str:
    """
    Convert an integer in [1, 3999] to its canonical Roman numeral.

    Raises:
        TypeError: If n is not an int (bool is rejected too).
        NumeralRangeError: If n is outside [1, 3999].
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Expected int, got {type(n).__name__}")
    if n < MIN_VALUE or n > MAX_VALUE:
        raise NumeralRangeError(n)

    parts: list[str] = []
    remaining = n
    for value, symbol in NUMERAL_TABLE:
        while remaining >= value:
            parts.append(symbol)
            remaining -= value
    return "".join(parts)
