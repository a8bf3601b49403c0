"""Application services layer.

Services coordinate domain logic for the HTTP and UI layers. They should avoid
transport and UI concerns.
"""

from roman_numeral.services.conversion_service import ConversionService, convert_query

__all__ = ["ConversionService", "convert_query"]
