"""
num2text — FastAPI Server
=========================

HTTP front end for the numeral-to-words engine.

Endpoints:
    POST /convert           Convert one value
    POST /convert/batch     Convert up to 1000 values in one language
    GET  /locales           Registered languages and their scale systems
    GET  /health            Health check / readiness probe

Configuration (environment or .env):
    NUM2TEXT_DEFAULT_LANG   language used when a request names none (default "en")
    NUM2TEXT_FALLBACK       text returned for invalid input (default: locale NaN word)
    NUM2TEXT_LOG_LEVEL      logging level (default WARNING)

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production
"""

from __future__ import annotations

import asyncio
import logging
import os
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from num2text import __version__
from num2text.currencies import available_currencies, get_currency
from num2text.exceptions import LocaleTableError, UnsupportedLocaleError
from num2text.locales import available_locales, get_locale, resolve_locale
from num2text.models import ConversionResult, RenderOptions, SpecialValue
from num2text.pipeline import Num2Text

# ─── Load .env if available ──────────────────────────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass

logging.basicConfig(level=os.getenv("NUM2TEXT_LOG_LEVEL", "WARNING").upper())
logger = logging.getLogger(__name__)


# ─── Application Lifespan (pre-warm converters) ─────────────────────

_converters: dict[str, Num2Text] | None = None


def _settings() -> tuple[str, Optional[str]]:
    return (
        os.getenv("NUM2TEXT_DEFAULT_LANG", "en"),
        os.getenv("NUM2TEXT_FALLBACK") or None,
    )


def build_converters(fallback: Optional[str] = None) -> dict[str, Num2Text]:
    """One immutable converter per registered language."""
    return {
        code: Num2Text(code, fallback_on_error=fallback) for code in available_locales()
    }


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Bind every registered locale once on startup."""
    global _converters  # noqa: PLW0603
    _, fallback = _settings()
    _converters = build_converters(fallback)
    logger.info("Loaded %d locales", len(_converters))
    yield
    _converters = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="num2text API",
    description=(
        "Spell out numbers in words. Short, long, myriad and Indian "
        "scales; gender and plural agreement; currency and year phrasing."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────

# Any JSON value; the normalizer decides what is numeric (true is not)
NumericInput = Any


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    value: NumericInput = Field(
        ...,
        description="Number to spell out. Strings keep full decimal precision.",
        json_schema_extra={"example": "1234.56"},
    )
    lang: Optional[str] = Field(
        default=None, description="Language code, e.g. 'en', 'ru', 'ja-JP'."
    )
    options: RenderOptions = Field(default_factory=RenderOptions)
    currency_code: Optional[str] = Field(
        default=None,
        description="ISO 4217 code; overrides options.currency in currency mode.",
    )
    fallback_on_error: Optional[str] = None


class BatchRequest(BaseModel):
    """Request body for the /convert/batch endpoint."""

    values: list[NumericInput] = Field(..., min_length=1, max_length=1000)
    lang: Optional[str] = None
    options: RenderOptions = Field(default_factory=RenderOptions)
    currency_code: Optional[str] = None
    fallback_on_error: Optional[str] = None


class ConvertResponse(BaseModel):
    """Conversion outcome with the fallback policy already applied."""

    text: str
    ok: bool
    error_code: Optional[str] = None
    lang: str
    special: SpecialValue = SpecialValue.NONE

    model_config = {"json_schema_extra": {"example": {
        "text": "one thousand two hundred thirty-four point five six",
        "ok": True,
        "error_code": None,
        "lang": "en",
        "special": "NONE",
    }}}


class BatchResponse(BaseModel):
    lang: str
    results: list[ConvertResponse]
    error_count: int


class LocaleOut(BaseModel):
    code: str
    name: str
    scale: str
    default_currency: str
    currencies: list[str]


class HealthResponse(BaseModel):
    status: str
    version: str
    locales_loaded: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_converters() -> dict[str, Num2Text]:
    if _converters is None:
        raise HTTPException(status_code=503, detail="Converters not initialised")
    return _converters


def _converter_for(lang: Optional[str], fallback: Optional[str]) -> Num2Text:
    """Pre-warmed converter for ``lang``, rebound if the fallback differs."""
    converters = _get_converters()
    default_lang, _ = _settings()
    try:
        # A misconfigured default language falls back to English with a warning
        binding = get_locale(lang) if lang else resolve_locale(default_lang)
    except UnsupportedLocaleError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    converter = converters.get(binding.code) or Num2Text(binding.code)
    if fallback is not None and fallback != converter.fallback_on_error:
        converter = Num2Text(binding.code, fallback_on_error=fallback)
    return converter


def _effective_options(
    options: RenderOptions, currency_code: Optional[str], lang: str
) -> RenderOptions:
    if currency_code is None:
        return options
    try:
        currency = get_currency(currency_code, lang)
    except LocaleTableError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return options.model_copy(update={"currency": currency})


def _build_response(converter: Num2Text, result: ConversionResult) -> ConvertResponse:
    return ConvertResponse(
        text=converter.resolve(result),
        ok=result.ok,
        error_code=result.error_code,
        lang=result.lang,
        special=result.special,
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Spell out one number",
    tags=["Conversion"],
    responses={
        422: {"description": "Unknown language or currency"},
        503: {"description": "Converters not yet initialised"},
    },
)
def convert_value(request: ConvertRequest) -> ConvertResponse:
    """Convert a single value.

    Invalid input is not an HTTP error: the response carries
    `ok: false`, an `error_code` and the fallback text.
    """
    converter = _converter_for(request.lang, request.fallback_on_error)
    options = _effective_options(request.options, request.currency_code, converter.lang)
    result = converter.try_convert(request.value, options)
    return _build_response(converter, result)


@app.post(
    "/convert/batch",
    summary="Spell out many numbers in one language",
    tags=["Conversion"],
    responses={
        422: {"description": "Unknown language, unknown currency or too many values"},
        503: {"description": "Converters not yet initialised"},
    },
)
async def convert_batch(request: BatchRequest) -> BatchResponse:
    """Convert up to 1000 values with shared options."""
    converter = _converter_for(request.lang, request.fallback_on_error)
    options = _effective_options(request.options, request.currency_code, converter.lang)

    def _run() -> list[ConvertResponse]:
        return [
            _build_response(converter, converter.try_convert(v, options))
            for v in request.values
        ]

    results = await asyncio.to_thread(_run)
    return BatchResponse(
        lang=converter.lang,
        results=results,
        error_count=sum(1 for r in results if not r.ok),
    )


@app.get("/locales", summary="Registered languages", tags=["System"])
def list_locales() -> list[LocaleOut]:
    """Every language the engine can speak, with its scale system."""
    currencies: dict[str, list[str]] = {}
    for currency_code, lang in available_currencies():
        currencies.setdefault(lang, []).append(currency_code)

    out = []
    for code in available_locales():
        binding = get_locale(code)
        out.append(
            LocaleOut(
                code=code,
                name=binding.name,
                scale=binding.magnitude.name,
                default_currency=binding.default_currency.code,
                currencies=currencies.get(code, []),
            )
        )
    return out


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Converters not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    converters = _get_converters()
    return HealthResponse(
        status="healthy",
        version=__version__,
        locales_loaded=len(converters),
    )
