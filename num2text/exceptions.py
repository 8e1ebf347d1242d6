"""
Custom exception hierarchy for numeral conversion.

Only ``NotNumericError`` is an expected outcome at conversion time. The
other types signal an incomplete locale table or magnitude ladder and are
meant to surface at registration time or in the test suite.
"""

from __future__ import annotations


class Num2TextError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class NotNumericError(Num2TextError):
    """The input cannot be normalized to a number."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("NOT_NUMERIC", message, details)


class UnsupportedMagnitudeError(Num2TextError):
    """The number is larger than the locale's scale ladder can name."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNSUPPORTED_MAGNITUDE", message, details)


class LocaleTableError(Num2TextError):
    """A word provider has no entry for the requested key."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("LOCALE_TABLE_MISS", message, details)


class UnsupportedLocaleError(Num2TextError):
    """No locale binding is registered under the requested code."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNSUPPORTED_LOCALE", message, details)
