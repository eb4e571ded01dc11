"""
Runtime settings read from the environment.

    NUMERAL_WORDS_DEFAULT_LANG   language used when a call names none   (en)
    NUMERAL_WORDS_MAX_DIGITS     largest accepted integer/decimal part  (1000)
    NUMERAL_WORDS_LOG_LEVEL      level for the CLI and API loggers      (WARNING)

The entry points load a ``.env`` file first, so these can live there.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .parser import DEFAULT_MAX_DIGITS

ENV_PREFIX = "NUMERAL_WORDS_"

# Python refuses int() on strings longer than 4300 digits by default
_MAX_DIGITS_CEILING = 4000


class Settings(BaseSettings):
    """Engine configuration, read from ``NUMERAL_WORDS_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, frozen=True)

    default_lang: str = "en"
    max_digits: int = Field(DEFAULT_MAX_DIGITS, ge=1, le=_MAX_DIGITS_CEILING)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("default_lang")
    @classmethod
    def _non_empty_tag(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("default language must not be empty")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from the process environment.

    ``NUMERAL_WORDS_*`` entries of ``environ``, when given, take precedence
    over the process environment.

    Raises:
        ConfigurationError: If a variable is present but malformed.
    """
    overrides: dict[str, str] = {}
    for name, value in (environ or {}).items():
        field = name[len(ENV_PREFIX):].lower() if name.startswith(ENV_PREFIX) else ""
        if field in Settings.model_fields:
            overrides[field] = value

    try:
        return Settings(**overrides)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid {ENV_PREFIX}* setting: {exc.errors()[0]['msg']}",
            {"errors": exc.errors(include_url=False, include_context=False)},
        ) from exc
