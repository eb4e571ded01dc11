"""
Custom exception hierarchy for number-to-words conversion.

Each exception type maps to one category of failure so that callers (the CLI,
the HTTP API) can tell "bad input" apart from "bad or missing language".
"""

from __future__ import annotations


class NumeralWordsError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class InvalidNumberFormat(NumeralWordsError):
    """The input cannot be read as a number (malformed string, NaN, infinity)."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_NUMBER_FORMAT", message, details)


class NumberOutOfRange(InvalidNumberFormat):
    """The number is well formed but too large to be spoken."""

    def __init__(self, message: str, details: dict | None = None):
        NumeralWordsError.__init__(self, "NUMBER_OUT_OF_RANGE", message, details)


class UnsupportedInputType(NumeralWordsError):
    """The input is not an int, float, Decimal or string."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNSUPPORTED_INPUT_TYPE", message, details)


class UnknownLanguage(NumeralWordsError):
    """No language profile matches the requested locale tag."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNKNOWN_LANGUAGE", message, details)


class InvalidOptions(NumeralWordsError):
    """The conversion options are unknown or ill-typed for the language."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_OPTIONS", message, details)


class ConfigurationError(NumeralWordsError):
    """A language profile or setting is incomplete or malformed."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("CONFIGURATION_ERROR", message, details)
