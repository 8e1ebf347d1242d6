"""
Arabic: singular/dual/plural agreement and gender polarity.

Counted nouns (scale words and currency units) follow the count:

    1 → ألف          (count word dropped)
    2 → ألفان        (dual, count word dropped)
    3-10 → ثلاثة آلاف (plural; the count takes the opposite gender)
    11-99 → أحد عشر ألفًا (accusative singular)
    100, 1000 … → مئة ألف (singular)

"و" ("and") is written joined to the word after it.
"""

from __future__ import annotations

from ..currencies import SAR
from ..magnitude import SHORT_SCALE
from ..models import (
    DecimalSeparatorStyle,
    Gender,
    GrammaticalContext,
    NumeralClass,
    Role,
    UnitForms,
)
from ..numeral_classes import ARABIC_DUAL, NumeralClassSelector
from .base import LocaleBinding, LocaleTokens, scale_forms

MAGNITUDE = SHORT_SCALE.truncated("septillion")

_AND = "و"

_MASC = (
    "صفر",
    "واحد",
    "اثنان",
    "ثلاثة",
    "أربعة",
    "خمسة",
    "ستة",
    "سبعة",
    "ثمانية",
    "تسعة",
    "عشرة",
    "أحد عشر",
    "اثنا عشر",
    "ثلاثة عشر",
    "أربعة عشر",
    "خمسة عشر",
    "ستة عشر",
    "سبعة عشر",
    "ثمانية عشر",
    "تسعة عشر",
)

_FEM = (
    "صفر",
    "واحدة",
    "اثنتان",
    "ثلاث",
    "أربع",
    "خمس",
    "ست",
    "سبع",
    "ثمان",
    "تسع",
    "عشر",
    "إحدى عشرة",
    "اثنتا عشرة",
    "ثلاث عشرة",
    "أربع عشرة",
    "خمس عشرة",
    "ست عشرة",
    "سبع عشرة",
    "ثماني عشرة",
    "تسع عشرة",
)

_TENS = ("", "", "عشرون", "ثلاثون", "أربعون", "خمسون", "ستون", "سبعون", "ثمانون", "تسعون")

_HUNDREDS = (
    "",
    "مئة",
    "مئتان",
    "ثلاثمئة",
    "أربعمئة",
    "خمسمئة",
    "ستمئة",
    "سبعمئة",
    "ثمانمئة",
    "تسعمئة",
)


def _forms(singular: str, dual: str, few: str, many: str) -> UnitForms:
    return UnitForms(singular=singular, dual=dual, few=few, many=many)


_SCALES: dict[str, UnitForms] = {
    "thousand": _forms("ألف", "ألفان", "آلاف", "ألفًا"),
    "million": _forms("مليون", "مليونان", "ملايين", "مليونًا"),
    "billion": _forms("مليار", "ملياران", "مليارات", "مليارًا"),
    "trillion": _forms("تريليون", "تريليونان", "تريليونات", "تريليونًا"),
    "quadrillion": _forms("كوادريليون", "كوادريليونان", "كوادريليونات", "كوادريليونًا"),
    "quintillion": _forms("كوينتيليون", "كوينتيليونان", "كوينتيليونات", "كوينتيليونًا"),
    "sextillion": _forms("سكستيليون", "سكستيليونان", "سكستيليونات", "سكستيليونًا"),
    "septillion": _forms("سبتيليون", "سبتيليونان", "سبتيليونات", "سبتيليونًا"),
}

_NOUN_ROLES = (Role.CURRENCY_MAJOR, Role.CURRENCY_MINOR)
_ELIDED = (NumeralClass.ONE, NumeralClass.TWO)


def _below_hundred(n: int, gender: Gender) -> list[str]:
    words = _FEM if gender is Gender.FEMININE else _MASC
    if n < 20:
        return [words[n]]
    tens, unit = divmod(n, 10)
    if not unit:
        return [_TENS[tens]]
    # Units come first: "واحد وعشرون" (one and twenty)
    unit_word = "إحدى" if gender is Gender.FEMININE and unit == 1 else words[unit]
    return [unit_word, _AND + _TENS[tens]]


class ArabicWords:
    code = "ar"

    def __init__(self, magnitude=MAGNITUDE):
        self.magnitude = magnitude

    def chunk(self, n: int, gender: Gender) -> list[str]:
        """Words for 1-999."""
        hundreds, rest = divmod(n, 100)
        words: list[str] = []
        if hundreds:
            words.append(_HUNDREDS[hundreds])
        if rest:
            tail = _below_hundred(rest, gender)
            if words:
                tail[0] = _AND + tail[0]
            words += tail
        return words

    def render_group(self, value, context, scale_level, options):
        counts_noun = (
            scale_level > 0 or context.before_noun or context.role in _NOUN_ROLES
        )
        gender = context.gender
        if counts_noun and context.numeral_class is NumeralClass.FEW:
            gender = Gender.MASCULINE
        if not scale_level:
            return self.chunk(value, gender)
        scale = self.scale_word(scale_level, context)
        if context.numeral_class in _ELIDED:
            return scale
        return self.chunk(value, gender) + scale

    def scale_word(self, scale_level: int, context: GrammaticalContext) -> list[str]:
        forms = scale_forms(_SCALES, self.magnitude, scale_level, self.code)
        return [forms.select(context.numeral_class)]

    def join_groups(self, parts, conjunction=None):
        conj = conjunction or _AND
        words: list[str] = []
        for i, part in enumerate(parts):
            if i and part:
                words += [conj + part[0]] + part[1:]
            else:
                words += part
        return words

    def attach_unit(self, count, forms, context):
        noun = forms.select(context.numeral_class)
        if forms.has_dual and context.numeral_class in _ELIDED:
            return [noun]
        return count + [noun]

    def render_year(self, year, cardinal, options):
        return None


BINDING = LocaleBinding(
    code="ar",
    name="العربية",
    magnitude=MAGNITUDE,
    selector=NumeralClassSelector(ARABIC_DUAL),
    words=ArabicWords(),
    tokens=LocaleTokens(
        zero="صفر",
        digits=_MASC[:10],
        negative="سالب",
        separators={
            DecimalSeparatorStyle.COMMA: "فاصلة",
            DecimalSeparatorStyle.POINT: "نقطة",
            DecimalSeparatorStyle.PERIOD: "نقطة",
        },
        default_separator=DecimalSeparatorStyle.COMMA,
        not_a_number="ليس رقماً",
        infinity="لانهاية",
        negative_infinity="سالب لانهاية",
        era_bc="ق.م",
        era_ad="م",
        currency_conjunction=_AND,
        omit_zero_major=True,
    ),
    default_currency=SAR,
    default_gender=Gender.MASCULINE,
)
