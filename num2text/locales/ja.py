"""Japanese: myriad grouping (万, 億, 兆 …), kanji numerals, no spaces."""

from __future__ import annotations

from ..currencies import JPY
from ..magnitude import MYRIAD
from ..models import DecimalSeparatorStyle, GrammaticalContext, UnitForms
from ..numeral_classes import INVARIANT, NumeralClassSelector
from .base import LocaleBinding, LocaleTokens, scale_forms

_DIGITS = ("〇", "一", "二", "三", "四", "五", "六", "七", "八", "九")

# 十, 百 and 千 take no leading 一 inside a group
_POSITIONS = ((1000, "千"), (100, "百"), (10, "十"))

_SCALES: dict[str, UnitForms] = {
    "man": UnitForms(singular="万"),
    "oku": UnitForms(singular="億"),
    "cho": UnitForms(singular="兆"),
    "kei": UnitForms(singular="京"),
    "gai": UnitForms(singular="垓"),
    "jo": UnitForms(singular="秭"),
}


class JapaneseWords:
    code = "ja"

    def __init__(self, magnitude=MYRIAD):
        self.magnitude = magnitude

    def chunk(self, n: int) -> list[str]:
        """Kanji for 1-9999."""
        words: list[str] = []
        for size, mark in _POSITIONS:
            digit, n = divmod(n, size)
            if digit:
                words.append(mark if digit == 1 else _DIGITS[digit] + mark)
        if n:
            words.append(_DIGITS[n])
        return words

    def render_group(self, value, context, scale_level, options):
        words = self.chunk(value)
        if scale_level:
            words += self.scale_word(scale_level, context)
        return words

    def scale_word(self, scale_level: int, context: GrammaticalContext) -> list[str]:
        forms = scale_forms(_SCALES, self.magnitude, scale_level, self.code)
        return [forms.singular]

    def join_groups(self, parts, conjunction=None):
        words: list[str] = []
        for i, part in enumerate(parts):
            if i and conjunction:
                words.append(conjunction)
            words += part
        return words

    def attach_unit(self, count, forms, context):
        return count + [forms.singular]

    def render_year(self, year, cardinal, options):
        return None


BINDING = LocaleBinding(
    code="ja",
    name="日本語",
    magnitude=MYRIAD,
    selector=NumeralClassSelector(INVARIANT),
    words=JapaneseWords(),
    tokens=LocaleTokens(
        zero="ゼロ",
        digits=_DIGITS,
        negative="マイナス",
        separators={
            DecimalSeparatorStyle.POINT: "点",
            DecimalSeparatorStyle.PERIOD: "点",
            DecimalSeparatorStyle.COMMA: "コンマ",
        },
        default_separator=DecimalSeparatorStyle.POINT,
        not_a_number="非数",
        infinity="無限大",
        negative_infinity="負の無限大",
        era_bc="紀元前",
        era_ad="西暦",
        era_position="prefix",
        year_marker="年",
        joiner="",
        omit_zero_major=True,
    ),
    default_currency=JPY,
)
