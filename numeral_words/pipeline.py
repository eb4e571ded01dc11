"""
Conversion pipeline — the public entry point.

Flow:
  ┌──────────────┐
  │ value + lang │
  └──────┬───────┘
         │
  ┌──────▼──────┐     ┌──────────────┐
  │   Parser    │     │   Registry   │   ← locale tag → LanguageProfile
  └──────┬──────┘     └──────┬───────┘
         │                   │
         │            ┌──────▼───────┐
         │            │   Options    │   ← unknown keys rejected
         │            └──────┬───────┘
         └─────────┬─────────┘
            ┌──────▼──────┐
            │  Composer   │   ← segments, scale words, decimals, sign
            └──────┬──────┘
            ┌──────▼──────┐
            │    words    │
            └─────────────┘

Errors are raised where they are detected and never turned into a
best-effort reading.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any

from .composer import to_words
from .config import Settings, load_settings
from .parser import parse_value
from .registry import LanguageRegistry

logger = logging.getLogger(__name__)


class ConversionPipeline:
    """Converts numbers to words for any registered language.

    Usage:
        pipeline = ConversionPipeline()
        pipeline.run(1234)                                 # "one thousand two hundred and thirty-four"
        pipeline.run(1, "ru", {"gender": "feminine"})      # "одна"
    """

    def __init__(
        self, registry: LanguageRegistry | None = None, settings: Settings | None = None
    ):
        self.settings = settings or load_settings()
        self.registry = registry or LanguageRegistry()

    def run(
        self, value: Any, lang: str | None = None, options: Mapping[str, Any] | None = None
    ) -> str:
        """Spell ``value`` in ``lang`` (the configured default when omitted).

        Raises:
            InvalidNumberFormat, NumberOutOfRange, UnsupportedInputType:
                The value cannot be read or spoken.
            UnknownLanguage: ``lang`` does not resolve to a profile.
            InvalidOptions: ``options`` do not fit the language.
        """
        profile = self.registry.resolve(lang or self.settings.default_lang)
        context = profile.context(profile.parse_options(options))
        numeric = parse_value(value, max_digits=self.settings.max_digits)

        words = to_words(numeric, profile, context)
        logger.debug("Converted %r (%s) -> %r", value, profile.code, words)
        return words


# ─── Module-level Convenience ────────────────────────────────────────

_default_pipeline: ConversionPipeline | None = None
_default_lock = threading.Lock()


def default_pipeline() -> ConversionPipeline:
    """The shared pipeline behind ``convert``; created once, on first use."""
    global _default_pipeline  # noqa: PLW0603
    if _default_pipeline is None:
        with _default_lock:
            if _default_pipeline is None:
                _default_pipeline = ConversionPipeline()
    return _default_pipeline


def convert(value: Any, /, lang: str | None = None, **options: Any) -> str:
    """Spell a number: ``convert(-12.6)`` → "minus twelve point six".

    Keyword arguments other than ``lang`` are language options, e.g.
    ``convert(1, lang="ru", gender="feminine")``.
    """
    return default_pipeline().run(value, lang, options)
