"""Roman numeral converter: validation, conversion, HTTP API and UI client."""

__version__ = "1.0.0"
