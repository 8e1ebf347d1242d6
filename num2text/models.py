"""
Typed models shared by every stage of the conversion pipeline.

Per-call values that never leave the engine (canonical numbers, groups,
grammatical contexts) are frozen dataclasses. Anything a caller builds or
receives (options, currency records, results) is a pydantic model so that
it validates at the boundary and serializes cleanly over HTTP.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .digits import digits_to_int


# ─── Enumerations ───────────────────────────────────────────────────


class SpecialValue(str, Enum):
    """Non-finite inputs that bypass decomposition."""

    NONE = "NONE"
    POSITIVE_INFINITY = "POSITIVE_INFINITY"
    NEGATIVE_INFINITY = "NEGATIVE_INFINITY"
    NOT_A_NUMBER = "NOT_A_NUMBER"


class Gender(str, Enum):
    UNSPECIFIED = "UNSPECIFIED"
    MASCULINE = "MASCULINE"
    FEMININE = "FEMININE"
    NEUTER = "NEUTER"


class NumeralClass(str, Enum):
    """Grammatical number a counted noun must agree with."""

    ONE = "ONE"  # exactly one
    TWO = "TWO"  # dual
    FEW = "FEW"  # small class, e.g. Slavic 2-4, Arabic 3-10
    MANY = "MANY"  # large class, e.g. Slavic 5-20, Arabic 11-99
    OTHER = "OTHER"  # general plural or the invariant form


class Role(str, Enum):
    """What the rendered quantity is counting."""

    CARDINAL = "CARDINAL"
    CURRENCY_MAJOR = "CURRENCY_MAJOR"
    CURRENCY_MINOR = "CURRENCY_MINOR"
    YEAR = "YEAR"


class OutputMode(str, Enum):
    PLAIN = "PLAIN"
    CURRENCY = "CURRENCY"
    YEAR = "YEAR"


class DecimalSeparatorStyle(str, Enum):
    COMMA = "COMMA"
    POINT = "POINT"
    PERIOD = "PERIOD"  # alias of POINT in every shipped locale


class FractionReading(str, Enum):
    DIGITS = "DIGITS"  # "point four five"
    INTEGER = "INTEGER"  # "point forty-five"


# ─── Pipeline Values ────────────────────────────────────────────────


@dataclass(frozen=True)
class CanonicalNumber:
    """A normalized input: sign, digit strings, or a special-value tag."""

    sign: int = 1
    integer_digits: str = "0"
    fractional_digits: str = ""
    special: SpecialValue = SpecialValue.NONE

    def __post_init__(self):
        if self.sign not in (1, -1):
            raise ValueError(f"sign must be +1 or -1, got {self.sign}")
        if self.special is not SpecialValue.NONE:
            if self.integer_digits not in ("", "0") or self.fractional_digits:
                raise ValueError("special values carry no digits")
            return
        if not self.integer_digits.isdigit() or (
            len(self.integer_digits) > 1 and self.integer_digits[0] == "0"
        ):
            raise ValueError(f"malformed integer digits: {self.integer_digits!r}")
        if self.fractional_digits and not self.fractional_digits.isdigit():
            raise ValueError(
                f"malformed fractional digits: {self.fractional_digits!r}"
            )
        if self.is_zero and self.sign != 1:
            raise ValueError("zero is always positive")

    @property
    def is_special(self) -> bool:
        return self.special is not SpecialValue.NONE

    @property
    def is_zero(self) -> bool:
        return (
            not self.is_special
            and self.integer_digits == "0"
            and not self.fractional_digits.strip("0")
        )

    @property
    def is_negative(self) -> bool:
        return self.sign < 0

    @property
    def integer_value(self) -> int:
        return digits_to_int(self.integer_digits or "0")


@dataclass(frozen=True)
class NumberGroup:
    """One slice of digits produced by the group decomposer.

    ``power`` is the decimal exponent of the group's lowest digit, so the
    groups of a number always satisfy ``sum(value * 10**power) == n``.
    ``enclosing`` lists the scale levels of outer tiers that multiply this
    group when the number exceeds the largest named scale, outermost first.
    ``closes`` holds the ``(scale_level, quantity)`` outer scale words that
    are spoken right after this group.
    """

    value: int
    scale_level: int
    power: int
    is_trailing_zero_group: bool = False
    enclosing: tuple[int, ...] = ()
    closes: tuple[tuple[int, int], ...] = ()


@dataclass(frozen=True)
class GrammaticalContext:
    gender: Gender
    numeral_class: NumeralClass
    role: Role = Role.CARDINAL
    # a counted noun (an outer scale word) follows this group
    before_noun: bool = False


# ─── Unit and Currency Metadata ─────────────────────────────────────


class UnitForms(BaseModel):
    """Inflected forms of a counted noun (scale word or currency unit).

    Only ``singular`` is required; a missing form falls back to
    ``plural`` and then to ``singular``.
    """

    model_config = ConfigDict(frozen=True)

    singular: str
    plural: Optional[str] = None
    dual: Optional[str] = None
    few: Optional[str] = None
    many: Optional[str] = None

    @property
    def has_dual(self) -> bool:
        return self.dual is not None

    def select(self, numeral_class: NumeralClass) -> str:
        if numeral_class is NumeralClass.ONE:
            return self.singular
        specific = {
            NumeralClass.TWO: self.dual,
            NumeralClass.FEW: self.few,
            NumeralClass.MANY: self.many,
        }.get(numeral_class)
        return specific or self.plural or self.singular


class CurrencyInfo(BaseModel):
    """Currency identity and the noun forms of its units."""

    model_config = ConfigDict(frozen=True)

    code: str  # ISO 4217, e.g. "USD"
    symbol: str
    major: UnitForms
    minor: Optional[UnitForms] = None  # None for currencies without subunits
    major_gender: Gender = Gender.MASCULINE
    minor_gender: Gender = Gender.MASCULINE
    separator: Optional[str] = None  # overrides the locale conjunction
    minor_digits: int = Field(default=2, ge=0)


# ─── Options and Results ────────────────────────────────────────────


class RenderOptions(BaseModel):
    """Per-call rendering configuration."""

    model_config = ConfigDict(frozen=True)

    mode: OutputMode = OutputMode.PLAIN
    decimal_separator: Optional[DecimalSeparatorStyle] = None
    fraction_reading: FractionReading = FractionReading.DIGITS
    negative_prefix: Optional[str] = None
    include_era_suffix: bool = False
    currency: Optional[CurrencyInfo] = None
    round: bool = False  # half-up to the currency's minor digits
    include_and: bool = False
    gender: Optional[Gender] = None
    include_zero_minor: bool = False


class ConversionResult(BaseModel):
    """Outcome of one conversion, before fallback substitution."""

    text: Optional[str] = None
    ok: bool
    error_code: Optional[str] = None  # e.g. "NOT_NUMERIC"
    lang: str
    special: SpecialValue = SpecialValue.NONE

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "text": "one thousand two hundred thirty-four",
                    "ok": True,
                    "error_code": None,
                    "lang": "en",
                    "special": "NONE",
                }
            ]
        }
    }
