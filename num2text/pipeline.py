"""
Dispatcher — the public conversion entry point.

Flow:
  ┌───────────┐
  │ raw value │
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │ normalize │   ← NotNumeric is the only expected failure
  └─────┬─────┘
        │
  ┌─────▼─────┐     ┌────────────────┐
  │ composer  │ ◄── │ locale binding │   ← magnitude model, classes, words
  └─────┬─────┘     └────────────────┘
        │
  ┌─────▼─────┐
  │  result   │   ← Ok(text) or Err(code)
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │ fallback  │   ← substitution happens here and nowhere else
  └───────────┘

Design principles:
  - A Num2Text handle is bound to one locale and never mutated, so handles
    can be shared across threads freely.
  - Infinity always renders as its locale token, whatever the fallback.
  - Locale-table defects are logged loudly but never crash a conversion.
"""

from __future__ import annotations

import logging
from typing import Optional

from .composer import PhraseComposer
from .exceptions import LocaleTableError, NotNumericError, UnsupportedMagnitudeError
from .locales import get_locale
from .models import ConversionResult, RenderOptions, SpecialValue
from .normalizer import normalize

logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = RenderOptions()


class Num2Text:
    """A converter bound to one language.

    Usage:
        ru = Num2Text("ru", fallback_on_error="—")
        ru.convert(21)                          # "двадцать один"
        ru.with_lang("en").convert(21)          # "twenty-one"
        result = ru.try_convert("abc")
        if not result.ok:
            print(result.error_code)            # "NOT_NUMERIC"
    """

    def __init__(self, lang: str = "en", fallback_on_error: Optional[str] = None):
        self.binding = get_locale(lang)
        self.fallback_on_error = fallback_on_error
        self._composer = PhraseComposer(self.binding)

    @property
    def lang(self) -> str:
        return self.binding.code

    def with_lang(self, lang: str) -> Num2Text:
        """A new handle for ``lang`` with the same fallback text."""
        return Num2Text(lang, fallback_on_error=self.fallback_on_error)

    def try_convert(
        self, value: object, options: Optional[RenderOptions] = None
    ) -> ConversionResult:
        """Run the pipeline without substituting any fallback text."""
        options = options or _DEFAULT_OPTIONS

        # ── Step 1: Normalize ──────────────────────────────────────
        try:
            number = normalize(value)
        except NotNumericError as exc:
            logger.debug("[%s] not numeric: %s", self.lang, exc)
            return ConversionResult(ok=False, error_code=exc.code, lang=self.lang)

        # ── Step 2: Compose ────────────────────────────────────────
        try:
            text = self._composer.compose(number, options)
        except (LocaleTableError, UnsupportedMagnitudeError) as exc:
            logger.error(
                "[%s] locale table defect converting a %d-digit value: %s (%s)",
                self.lang,
                len(number.integer_digits),
                exc,
                exc.code,
            )
            return ConversionResult(
                ok=False,
                error_code=exc.code,
                lang=self.lang,
                special=number.special,
            )

        return ConversionResult(
            text=text, ok=True, lang=self.lang, special=number.special
        )

    def convert(self, value: object, options: Optional[RenderOptions] = None) -> str:
        """Convert ``value`` to words, applying the fallback policy."""
        return self.resolve(self.try_convert(value, options))

    __call__ = convert

    def resolve(self, result: ConversionResult) -> str:
        """Turn a ConversionResult into the text a caller sees.

        Errors and NaN give the configured fallback text, or the locale's
        not-a-number token when there is none. Infinity passes through.
        """
        nan_like = not result.ok or result.special is SpecialValue.NOT_A_NUMBER
        if nan_like:
            if self.fallback_on_error is not None:
                return self.fallback_on_error
            return self.binding.tokens.not_a_number
        return result.text or ""

    def __repr__(self) -> str:
        return f"Num2Text(lang={self.lang!r}, fallback_on_error={self.fallback_on_error!r})"


def convert(
    value: object,
    lang: str = "en",
    options: Optional[RenderOptions] = None,
    fallback_on_error: Optional[str] = None,
) -> str:
    """One-shot conversion: ``convert(1984, "en")``."""
    return Num2Text(lang, fallback_on_error=fallback_on_error).convert(value, options)
