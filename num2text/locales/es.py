"""
Spanish: long scale with six-digit groups.

A group holds up to 999 999 and says its own thousands ("mil"), so
10**9 is "mil millones" rather than a separate billion tier. "uno" and
"veintiuno" shorten to "un"/"veintiún" in front of a noun (a scale word
or a currency unit).
"""

from __future__ import annotations

from ..currencies import EUR_ES
from ..magnitude import LONG_SCALE
from ..models import DecimalSeparatorStyle, GrammaticalContext, Role, UnitForms
from ..numeral_classes import ONE_OTHER, NumeralClassSelector
from .base import LocaleBinding, LocaleTokens, scale_forms

_BELOW_30 = (
    "cero",
    "uno",
    "dos",
    "tres",
    "cuatro",
    "cinco",
    "seis",
    "siete",
    "ocho",
    "nueve",
    "diez",
    "once",
    "doce",
    "trece",
    "catorce",
    "quince",
    "dieciséis",
    "diecisiete",
    "dieciocho",
    "diecinueve",
    "veinte",
    "veintiuno",
    "veintidós",
    "veintitrés",
    "veinticuatro",
    "veinticinco",
    "veintiséis",
    "veintisiete",
    "veintiocho",
    "veintinueve",
)

_APOCOPE = {1: "un", 21: "veintiún"}

_TENS = (
    "",
    "",
    "",
    "treinta",
    "cuarenta",
    "cincuenta",
    "sesenta",
    "setenta",
    "ochenta",
    "noventa",
)

_HUNDREDS = (
    "",
    "ciento",
    "doscientos",
    "trescientos",
    "cuatrocientos",
    "quinientos",
    "seiscientos",
    "setecientos",
    "ochocientos",
    "novecientos",
)

_SCALES: dict[str, UnitForms] = {
    "million": UnitForms(singular="millón", plural="millones"),
    "billion": UnitForms(singular="billón", plural="billones"),
    "trillion": UnitForms(singular="trillón", plural="trillones"),
    "quadrillion": UnitForms(singular="cuatrillón", plural="cuatrillones"),
}

_NOUN_ROLES = (Role.CURRENCY_MAJOR, Role.CURRENCY_MINOR)


class SpanishWords:
    code = "es"

    def __init__(self, magnitude=LONG_SCALE):
        self.magnitude = magnitude

    def chunk(self, n: int, apocope: bool = False) -> list[str]:
        """Words for 1-999."""
        if n == 100:
            return ["cien"]
        hundreds, rest = divmod(n, 100)
        words: list[str] = []
        if hundreds:
            words.append(_HUNDREDS[hundreds])
        if not rest:
            return words
        if rest < 30:
            words.append(_APOCOPE[rest] if apocope and rest in _APOCOPE else _BELOW_30[rest])
            return words
        tens, unit = divmod(rest, 10)
        words.append(_TENS[tens])
        if unit:
            words += ["y", _APOCOPE[1] if apocope and unit == 1 else _BELOW_30[unit]]
        return words

    def render_group(self, value, context, scale_level, options):
        apocope = (
            scale_level > 0 or context.before_noun or context.role in _NOUN_ROLES
        )
        thousands, units = divmod(value, 1000)
        words: list[str] = []
        if thousands == 1:
            words.append("mil")
        elif thousands:
            words += self.chunk(thousands, apocope=True) + ["mil"]
        if units:
            words += self.chunk(units, apocope)
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

    def render_year(self, year, cardinal, options):
        return None


BINDING = LocaleBinding(
    code="es",
    name="Español",
    magnitude=LONG_SCALE,
    selector=NumeralClassSelector(ONE_OTHER),
    words=SpanishWords(),
    tokens=LocaleTokens(
        zero="cero",
        digits=_BELOW_30[:10],
        negative="menos",
        separators={
            DecimalSeparatorStyle.COMMA: "coma",
            DecimalSeparatorStyle.POINT: "punto",
            DecimalSeparatorStyle.PERIOD: "punto",
        },
        default_separator=DecimalSeparatorStyle.COMMA,
        not_a_number="No es un número",
        infinity="Infinito",
        negative_infinity="Menos Infinito",
        era_bc="a.C.",
        era_ad="d.C.",
        currency_conjunction="con",
        omit_zero_major=True,
    ),
    default_currency=EUR_ES,
)
