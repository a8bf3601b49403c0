"""Value objects returned by the conversion service."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Union

from roman_numeral.domains.numerals.validator import ValidationErrorKind

# Failure kind for anything outside the validation taxonomy.
UNEXPECTED = "UNEXPECTED"


@dataclass(frozen=True)
class ConversionResult:
    """Successful conversion: trimmed input and its numeral."""

    input: str
    output: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ConversionFailure:
    """
    Failed conversion.

    `kind` is a ValidationErrorKind for client errors, or UNEXPECTED for an
    internal failure that should surface as a server error.
    """

    kind: Union[ValidationErrorKind, str]
    message: str

    @property
    def is_validation_error(self) -> bool:
        return isinstance(self.kind, ValidationErrorKind)

    @property
    def error_type(self) -> str:
        """Kind name as used in logs and metric labels."""
        return self.kind.value if isinstance(self.kind, ValidationErrorKind) else str(self.kind)

    @classmethod
    def from_kind(cls, kind: ValidationErrorKind) -> "ConversionFailure":
        return cls(kind=kind, message=kind.message)

    @classmethod
    def unexpected(cls, message: str) -> "ConversionFailure":
        return cls(kind=UNEXPECTED, message=message)


ConversionOutcome = Union[ConversionResult, ConversionFailure]
