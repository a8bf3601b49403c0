"""
Canonical Roman numeral units, largest first.

The seven base symbols plus the six subtractive pairs cover every base-10
digit position up to the thousands, so a greedy walk over this table always
terminates with a zero remainder.
"""

from __future__ import annotations

MIN_VALUE = 1
MAX_VALUE = 3999

NUMERAL_TABLE: tuple[tuple[int, str], ...] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

NUMERAL_SYMBOLS = frozenset("IVXLCDM")
