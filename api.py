"""
Numeral Words — FastAPI Server
==============================

HTTP front end for the number-to-words engine.

Endpoints:
    POST /convert           Spell a number in a language
    GET  /languages         Supported languages and their options
    GET  /health            Health check / readiness

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, Optional, Union

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr

from numeral_words import __version__
from numeral_words.config import load_settings
from numeral_words.exceptions import NumeralWordsError, UnknownLanguage
from numeral_words.pipeline import ConversionPipeline

load_dotenv()

logger = logging.getLogger(__name__)


# ─── Application Lifespan (pre-warm profiles) ───────────────────────

_pipeline: ConversionPipeline | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build every language profile on startup so no request pays for it."""
    global _pipeline  # noqa: PLW0603
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
    _pipeline = ConversionPipeline(settings=settings)
    _pipeline.registry.warm()
    logger.info("Loaded %d language profiles", _pipeline.registry.loaded)
    yield
    _pipeline = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Numeral Words API",
    description=(
        "Spell numbers out in words. Integers of any size, decimals and "
        "negative values, in fifteen languages and locales."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    value: Union[StrictInt, StrictFloat, StrictStr] = Field(
        ...,
        description=(
            "The number to spell. Send large or many-decimal values as strings "
            "to avoid floating-point rounding. Booleans are not numbers."
        ),
        json_schema_extra={"example": "1234.5"},
    )
    lang: Optional[str] = Field(
        None,
        description="Locale tag such as en, en-US, fr-BE, zh-Hant. Defaults to the server setting.",
    )
    options: dict[str, Any] = Field(
        default_factory=dict,
        description="Per-language options, e.g. {\"gender\": \"feminine\"} for ru/pl.",
    )


class ConvertResponse(BaseModel):
    words: str
    lang: str = Field(description="The language code the tag resolved to")
    value: str = Field(description="The input value, echoed as text")


class LanguageOut(BaseModel):
    code: str
    name: str
    grouping: str
    decimal_policy: str
    options: dict[str, Any] = Field(description="Option names mapped to their defaults")


class HealthResponse(BaseModel):
    status: str
    version: str
    languages_loaded: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_pipeline() -> ConversionPipeline:
    if _pipeline is None:
        raise HTTPException(status_code=503, detail="Pipeline not initialised")
    return _pipeline


def _error_detail(exc: NumeralWordsError) -> dict[str, Any]:
    return {"code": exc.code, "message": str(exc), "details": exc.details}


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Spell a number in words",
    tags=["Conversion"],
    responses={
        404: {"description": "Unknown language"},
        422: {"description": "Malformed number, unsupported value or invalid options"},
        503: {"description": "Pipeline not yet initialised"},
    },
)
def convert_number(request: ConvertRequest) -> ConvertResponse:
    """Convert one value to words.

    - **value**: int, float or numeric string (`"-12.6"`, `"1000000000000000000000"`)
    - **lang**: locale tag; region tags fall back to the base language (`fr-CA` → `fr`)
    - **options**: language options; unknown keys are rejected
    """
    pipeline = _get_pipeline()
    lang = request.lang or pipeline.settings.default_lang
    try:
        code = pipeline.registry.canonical_code(lang)
        words = pipeline.run(request.value, code, request.options)
    except UnknownLanguage as exc:
        raise HTTPException(status_code=404, detail=_error_detail(exc)) from exc
    except NumeralWordsError as exc:
        raise HTTPException(status_code=422, detail=_error_detail(exc)) from exc

    return ConvertResponse(words=words, lang=code, value=str(request.value))


@app.get(
    "/languages",
    summary="List supported languages",
    tags=["Conversion"],
)
def list_languages() -> list[LanguageOut]:
    """Every registered language with its grouping, decimal reading and options."""
    registry = _get_pipeline().registry
    languages: list[LanguageOut] = []
    for code in registry.codes:
        profile = registry.resolve(code)
        languages.append(
            LanguageOut(
                code=profile.code,
                name=profile.name,
                grouping=profile.grouping.value,
                decimal_policy=profile.decimal_policy.value,
                options={
                    name: field.default
                    for name, field in profile.options_model.model_fields.items()
                },
            )
        )
    return languages


@app.get(
    "/health",
    summary="Health check",
    tags=["Operations"],
)
def health_check() -> HealthResponse:
    """Readiness check — returns 200 when the profiles are loaded."""
    pipeline = _get_pipeline()
    return HealthResponse(
        status="healthy",
        version=__version__,
        languages_loaded=pipeline.registry.loaded,
    )
