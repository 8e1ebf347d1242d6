"""
num2text — numbers to words in many languages.

Architecture: Normalize → Decompose into magnitude groups → Classify → Words → Compose
Philosophy:  One engine, many grammars. Languages supply data, never control flow.
"""

__version__ = "1.0.0"

from .exceptions import (
    LocaleTableError,
    Num2TextError,
    NotNumericError,
    UnsupportedLocaleError,
    UnsupportedMagnitudeError,
)
from .locales import available_locales, get_locale, register_locale
from .models import (
    ConversionResult,
    CurrencyInfo,
    DecimalSeparatorStyle,
    FractionReading,
    Gender,
    OutputMode,
    RenderOptions,
    UnitForms,
)
from .pipeline import Num2Text, convert

__all__ = [
    "ConversionResult",
    "CurrencyInfo",
    "DecimalSeparatorStyle",
    "FractionReading",
    "Gender",
    "LocaleTableError",
    "NotNumericError",
    "Num2Text",
    "Num2TextError",
    "OutputMode",
    "RenderOptions",
    "UnitForms",
    "UnsupportedLocaleError",
    "UnsupportedMagnitudeError",
    "available_locales",
    "convert",
    "get_locale",
    "register_locale",
]
