"""
Russian: Slavic three-way agreement, feminine thousands, ordinal years.

    1 тысяча / 2-4 тысячи / 5-20 тысяч      (11-14 always take the last form)
    одна тысяча, две тысячи               (тысяча is feminine)
    2024 год → "две тысячи двадцать четвёртый"
"""

from __future__ import annotations

from typing import Optional

from ..currencies import RUB
from ..magnitude import SHORT_SCALE
from ..models import DecimalSeparatorStyle, Gender, GrammaticalContext, UnitForms
from ..numeral_classes import SLAVIC, NumeralClassSelector
from .base import LocaleBinding, LocaleTokens, scale_forms

MAGNITUDE = SHORT_SCALE.truncated("septillion")

_UNITS = ("", "один", "два", "три", "четыре", "пять", "шесть", "семь", "восемь", "девять")

_GENDERED = {
    Gender.FEMININE: {1: "одна", 2: "две"},
    Gender.NEUTER: {1: "одно"},
}

_TEENS = (
    "десять",
    "одиннадцать",
    "двенадцать",
    "тринадцать",
    "четырнадцать",
    "пятнадцать",
    "шестнадцать",
    "семнадцать",
    "восемнадцать",
    "девятнадцать",
)

_TENS = (
    "",
    "",
    "двадцать",
    "тридцать",
    "сорок",
    "пятьдесят",
    "шестьдесят",
    "семьдесят",
    "восемьдесят",
    "девяносто",
)

_HUNDREDS = (
    "",
    "сто",
    "двести",
    "триста",
    "четыреста",
    "пятьсот",
    "шестьсот",
    "семьсот",
    "восемьсот",
    "девятьсот",
)


def _forms(one: str, few: str, many: str) -> UnitForms:
    return UnitForms(singular=one, few=few, many=many)


_SCALES: dict[str, UnitForms] = {
    "thousand": _forms("тысяча", "тысячи", "тысяч"),
    "million": _forms("миллион", "миллиона", "миллионов"),
    "billion": _forms("миллиард", "миллиарда", "миллиардов"),
    "trillion": _forms("триллион", "триллиона", "триллионов"),
    "quadrillion": _forms("квадриллион", "квадриллиона", "квадриллионов"),
    "quintillion": _forms("квинтиллион", "квинтиллиона", "квинтиллионов"),
    "sextillion": _forms("секстиллион", "секстиллиона", "секстиллионов"),
    "septillion": _forms("септиллион", "септиллиона", "септиллионов"),
}

# ─── Ordinals (years) ───────────────────────────────────────────────

_ORDINALS: dict[str, str] = {
    "один": "первый",
    "одна": "первый",
    "два": "второй",
    "две": "второй",
    "три": "третий",
    "четыре": "четвёртый",
    "пять": "пятый",
    "шесть": "шестой",
    "семь": "седьмой",
    "восемь": "восьмой",
    "девять": "девятый",
    "десять": "десятый",
    "одиннадцать": "одиннадцатый",
    "двенадцать": "двенадцатый",
    "тринадцать": "тринадцатый",
    "четырнадцать": "четырнадцатый",
    "пятнадцать": "пятнадцатый",
    "шестнадцать": "шестнадцатый",
    "семнадцать": "семнадцатый",
    "восемнадцать": "восемнадцатый",
    "девятнадцать": "девятнадцатый",
    "двадцать": "двадцатый",
    "тридцать": "тридцатый",
    "сорок": "сороковой",
    "пятьдесят": "пятидесятый",
    "шестьдесят": "шестидесятый",
    "семьдесят": "семидесятый",
    "восемьдесят": "восьмидесятый",
    "девяносто": "девяностый",
    "сто": "сотый",
    "двести": "двухсотый",
    "триста": "трёхсотый",
    "четыреста": "четырёхсотый",
    "пятьсот": "пятисотый",
    "шестьсот": "шестисотый",
    "семьсот": "семисотый",
    "восемьсот": "восьмисотый",
    "девятьсот": "девятисотый",
}

# Genitive stems for "двухтысячный", "пятитысячный", …
_THOUSAND_STEMS = ("", "", "двух", "трёх", "четырёх", "пяти", "шести", "семи", "восьми", "девяти")


class RussianWords:
    code = "ru"

    def __init__(self, magnitude=MAGNITUDE):
        self.magnitude = magnitude

    def chunk(self, n: int, gender: Gender) -> list[str]:
        hundreds, rest = divmod(n, 100)
        words: list[str] = []
        if hundreds:
            words.append(_HUNDREDS[hundreds])
        if 10 <= rest < 20:
            words.append(_TEENS[rest - 10])
            return words
        tens, unit = divmod(rest, 10)
        if tens:
            words.append(_TENS[tens])
        if unit:
            words.append(_GENDERED.get(gender, {}).get(unit, _UNITS[unit]))
        return words

    def render_group(self, value, context, scale_level, options):
        words = self.chunk(value, context.gender)
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

    def render_year(self, year, cardinal, options) -> Optional[list[str]]:
        """Years are ordinals: only the last word changes."""
        thousands, rest = divmod(year, 1000)
        if rest == 0 and 1 <= thousands <= 9:
            return [_THOUSAND_STEMS[thousands] + "тысячный"]

        words = list(cardinal)
        # 1900 → "тысяча девятисотый", not "одна тысяча …"
        if 1000 <= year < 2000 and words[0] in ("одна", "один"):
            words = words[1:]
        ordinal = _ORDINALS.get(words[-1])
        if ordinal is None:
            return None
        words[-1] = ordinal
        return words


BINDING = LocaleBinding(
    code="ru",
    name="Русский",
    magnitude=MAGNITUDE,
    selector=NumeralClassSelector(SLAVIC),
    words=RussianWords(),
    tokens=LocaleTokens(
        zero="ноль",
        digits=("ноль",) + _UNITS[1:],
        negative="минус",
        separators={
            DecimalSeparatorStyle.COMMA: "запятая",
            DecimalSeparatorStyle.POINT: "точка",
            DecimalSeparatorStyle.PERIOD: "точка",
        },
        default_separator=DecimalSeparatorStyle.COMMA,
        not_a_number="Не число",
        infinity="Бесконечность",
        negative_infinity="Минус бесконечность",
        era_bc="до н. э.",
        era_ad="н. э.",
        omit_zero_major=True,
    ),
    default_currency=RUB,
    default_gender=Gender.MASCULINE,
    scale_genders={1: Gender.FEMININE, **{level: Gender.MASCULINE for level in range(2, 9)}},
)
