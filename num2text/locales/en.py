"""English: short scale, hyphenated tens, optional British "and"."""

from __future__ import annotations

from typing import Optional

from ..currencies import USD
from ..magnitude import SHORT_SCALE
from ..models import (
    DecimalSeparatorStyle,
    GrammaticalContext,
    RenderOptions,
    UnitForms,
)
from ..numeral_classes import ONE_OTHER, NumeralClassSelector
from .base import LocaleBinding, LocaleTokens, scale_forms

_ONES = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)

_TENS = (
    "",
    "",
    "twenty",
    "thirty",
    "forty",
    "fifty",
    "sixty",
    "seventy",
    "eighty",
    "ninety",
)

_SCALES: dict[str, UnitForms] = {
    key: UnitForms(singular=key) for key in SHORT_SCALE.scale_keys[1:]
}


def _below_hundred(n: int) -> str:
    if n < 20:
        return _ONES[n]
    tens, unit = divmod(n, 10)
    return f"{_TENS[tens]}-{_ONES[unit]}" if unit else _TENS[tens]


class EnglishWords:
    code = "en"

    def __init__(self, magnitude=SHORT_SCALE):
        self.magnitude = magnitude

    def chunk(self, n: int, include_and: bool = False) -> list[str]:
        """Words for 1-999."""
        hundreds, rest = divmod(n, 100)
        words: list[str] = []
        if hundreds:
            words += [_ONES[hundreds], "hundred"]
            if rest and include_and:
                words.append("and")
        if rest:
            words.append(_below_hundred(rest))
        return words

    def render_group(self, value, context, scale_level, options):
        words = self.chunk(value, options.include_and)
        if scale_level:
            words += self.scale_word(scale_level, context)
        return words

    def scale_word(self, scale_level: int, context: GrammaticalContext) -> list[str]:
        forms = scale_forms(_SCALES, self.magnitude, scale_level, self.code)
        return [forms.select(context.numeral_class)]

    def join_groups(self, parts, conjunction=None):
        words: list[str] = []
        for i, part in enumerate(parts):
            if i and conjunction:
                words.append(conjunction)
            words += part
        return words

    def attach_unit(self, count, forms, context):
        return count + [forms.select(context.numeral_class)]

    def render_year(
        self, year: int, cardinal: list[str], options: RenderOptions
    ) -> Optional[list[str]]:
        """Spoken year forms.

        1984 → "nineteen eighty-four", 1900 → "nineteen hundred",
        1905 → "nineteen hundred five", 2005 → "two thousand five",
        2024 → "twenty twenty-four". Other years read as cardinals.
        """
        and_ = ["and"] if options.include_and else []
        if 1100 <= year < 2000 or 2010 <= year < 2100:
            high, low = divmod(year, 100)
            if low == 0:
                return [_below_hundred(high), "hundred"]
            if low < 10:
                return [_below_hundred(high), "hundred", *and_, _ONES[low]]
            return [_below_hundred(high), _below_hundred(low)]
        if 2000 < year < 2010:
            return ["two", "thousand", *and_, _ONES[year - 2000]]
        return None


BINDING = LocaleBinding(
    code="en",
    name="English",
    magnitude=SHORT_SCALE,
    selector=NumeralClassSelector(ONE_OTHER),
    words=EnglishWords(),
    tokens=LocaleTokens(
        zero="zero",
        digits=_ONES[:10],
        negative="minus",
        separators={
            DecimalSeparatorStyle.POINT: "point",
            DecimalSeparatorStyle.PERIOD: "point",
            DecimalSeparatorStyle.COMMA: "comma",
        },
        default_separator=DecimalSeparatorStyle.POINT,
        not_a_number="Not a Number",
        infinity="Infinity",
        negative_infinity="Negative Infinity",
        era_bc="BC",
        era_ad="AD",
        currency_conjunction="and",
    ),
    default_currency=USD,
)
