"""
Numeral Words — spell numbers out in words, in many languages.

Architecture: Parse → Split into scale groups → Render groups → Compose scales → Assemble
Philosophy:  One generic engine; each language is vocabulary plus a few rules.
"""

from .exceptions import (
    ConfigurationError,
    InvalidNumberFormat,
    InvalidOptions,
    NumberOutOfRange,
    NumeralWordsError,
    UnknownLanguage,
    UnsupportedInputType,
)
from .pipeline import ConversionPipeline, convert

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "ConversionPipeline",
    "InvalidNumberFormat",
    "InvalidOptions",
    "NumberOutOfRange",
    "NumeralWordsError",
    "UnknownLanguage",
    "UnsupportedInputType",
    "convert",
]
