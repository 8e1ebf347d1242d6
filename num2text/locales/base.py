"""
The contract every locale satisfies, and the binding that ties it together.

A locale is a ``LocaleBinding``: a magnitude model, a numeral-class
selector, a word provider and a set of fixed tokens. Bindings are built
once at import time, validated, and shared read-only across threads.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal, Mapping, Optional, Protocol

from pydantic import BaseModel, ConfigDict, field_validator

from ..exceptions import LocaleTableError, UnsupportedMagnitudeError
from ..magnitude import MagnitudeModel
from ..models import (
    CurrencyInfo,
    DecimalSeparatorStyle,
    Gender,
    GrammaticalContext,
    RenderOptions,
    Role,
    UnitForms,
)
from ..numeral_classes import NumeralClassSelector

logger = logging.getLogger(__name__)


class WordProvider(Protocol):
    """Per-locale word selection. Implementations must be side-effect free."""

    def render_group(
        self,
        value: int,
        context: GrammaticalContext,
        scale_level: int,
        options: RenderOptions,
    ) -> list[str]:
        """Words for one non-zero group, including its scale word.

        ``context.before_noun`` is set when an outer tier's scale word
        follows a units group ("veintiún cuatrillones").
        """
        ...

    def scale_word(self, scale_level: int, context: GrammaticalContext) -> list[str]:
        """Scale word for ``scale_level`` agreeing with ``context``."""
        ...

    def join_groups(
        self, parts: list[list[str]], conjunction: Optional[str] = None
    ) -> list[str]:
        """Flatten rendered parts, inserting the locale's joining words."""
        ...

    def attach_unit(
        self, count: list[str], forms: UnitForms, context: GrammaticalContext
    ) -> list[str]:
        """Combine a rendered count with the noun it counts."""
        ...

    def render_year(
        self, year: int, cardinal: list[str], options: RenderOptions
    ) -> Optional[list[str]]:
        """Locale-specific year reading, or None to use ``cardinal``."""
        ...


class LocaleTokens(BaseModel):
    """Fixed words and formatting data of a locale."""

    model_config = ConfigDict(frozen=True)

    zero: str
    digits: tuple[str, ...]  # 0-9, used for digit-by-digit fractions
    negative: str
    separators: dict[DecimalSeparatorStyle, str]
    default_separator: DecimalSeparatorStyle = DecimalSeparatorStyle.POINT
    not_a_number: str
    infinity: str
    negative_infinity: str
    era_bc: str
    era_ad: str
    era_position: Literal["prefix", "suffix"] = "suffix"
    year_marker: Optional[str] = None
    currency_conjunction: Optional[str] = None
    joiner: str = " "
    omit_zero_major: bool = False

    @field_validator("digits")
    @classmethod
    def ten_digits(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if len(v) != 10:
            raise ValueError(f"expected 10 digit words, got {len(v)}")
        return v

    @field_validator("separators")
    @classmethod
    def all_separator_styles(
        cls, v: dict[DecimalSeparatorStyle, str]
    ) -> dict[DecimalSeparatorStyle, str]:
        missing = set(DecimalSeparatorStyle) - set(v)
        if missing:
            raise ValueError(
                f"missing separator words: {sorted(m.value for m in missing)}"
            )
        return v


@dataclass(frozen=True)
class LocaleBinding:
    """Everything the engine needs to speak one language."""

    code: str
    name: str
    magnitude: MagnitudeModel
    selector: NumeralClassSelector
    words: WordProvider
    tokens: LocaleTokens
    default_currency: CurrencyInfo
    default_gender: Gender = Gender.UNSPECIFIED
    scale_genders: Mapping[int, Gender] = field(default_factory=dict)

    def gender_for(self, scale_level: int, base: Gender) -> Gender:
        """Gender a group agrees with: its scale noun's, else ``base``."""
        if scale_level == 0:
            return base
        return self.scale_genders.get(scale_level, base)

    def classify(
        self, value: int, role: Role, scale_level: int, base: Gender
    ) -> GrammaticalContext:
        return self.selector.classify(value, role, self.gender_for(scale_level, base))


def lookup(table: Mapping, key, *, locale: str, what: str):
    """Table access that reports a miss as LocaleTableError."""
    try:
        return table[key]
    except (KeyError, IndexError):
        raise LocaleTableError(
            f"[{locale}] no {what} for {key!r}",
            details={"locale": locale, "what": what, "key": str(key)},
        ) from None


def scale_forms(
    table: Mapping[str, UnitForms], magnitude: MagnitudeModel, level: int, locale: str
) -> UnitForms:
    """Scale-word forms for ``level`` via the magnitude model's key."""
    key = lookup(magnitude.scale_keys, level, locale=locale, what="scale level")
    return lookup(table, key, locale=locale, what="scale word")


# ─── Load-time Validation ───────────────────────────────────────────


def validate_binding(binding: LocaleBinding) -> None:
    """Fail loudly if the binding cannot name every tier it claims.

    Every scale level must produce a word for every numeral class its
    selector can emit for group values 0-999, in every role.
    """
    classes = {
        binding.selector.classify(v, role).numeral_class
        for role in Role
        for v in range(1000)
    }
    for level in range(1, binding.magnitude.top_level + 1):
        for numeral_class in classes:
            context = GrammaticalContext(
                gender=binding.gender_for(level, binding.default_gender),
                numeral_class=numeral_class,
            )
            try:
                words = binding.words.scale_word(level, context)
            except LocaleTableError as exc:
                raise UnsupportedMagnitudeError(
                    f"[{binding.code}] scale level {level} "
                    f"({binding.magnitude.scale_keys[level]}) has no word "
                    f"for {numeral_class.value}",
                    details=exc.details,
                ) from exc
            if not words:
                raise UnsupportedMagnitudeError(
                    f"[{binding.code}] empty scale word at level {level}",
                    details={"level": level, "class": numeral_class.value},
                )
    logger.debug(
        "Validated locale %s (%d scale levels)", binding.code, binding.magnitude.top_level
    )
