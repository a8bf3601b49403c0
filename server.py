"""
Thin entrypoint for the API.

Usage example:
    uvicorn server:app --reload
"""

from roman_numeral.server import app, main  # noqa: F401

if __name__ == "__main__":
    main()
