"""
Hindi: Indian grouping (हज़ार, लाख, करोड़ …) with irregular words for 0-99.

    12,34,56,789 → "बारह करोड़ चौंतीस लाख छप्पन हज़ार सात सौ नवासी"

Every number below 100 has its own word, so there is no tens/units
composition. The hundreds always carry their count ("एक सौ").
"""

from __future__ import annotations

from ..currencies import INR_HI
from ..magnitude import INDIC
from ..models import DecimalSeparatorStyle, GrammaticalContext, UnitForms
from ..numeral_classes import ONE_OTHER, NumeralClassSelector
from .base import LocaleBinding, LocaleTokens, scale_forms

# One row per ten
_BELOW_100 = tuple(
    """
    शून्य एक दो तीन चार पाँच छह सात आठ नौ
    दस ग्यारह बारह तेरह चौदह पंद्रह सोलह सत्रह अठारह उन्नीस
    बीस इक्कीस बाईस तेईस चौबीस पच्चीस छब्बीस सत्ताईस अट्ठाईस उनतीस
    तीस इकतीस बत्तीस तैंतीस चौंतीस पैंतीस छत्तीस सैंतीस अड़तीस उनतालीस
    चालीस इकतालीस बयालीस तैंतालीस चौवालीस पैंतालीस छियालीस सैंतालीस अड़तालीस उनचास
    पचास इक्यावन बावन तिरपन चौवन पचपन छप्पन सत्तावन अट्ठावन उनसठ
    साठ इकसठ बासठ तिरसठ चौंसठ पैंसठ छियासठ सड़सठ अड़सठ उनहत्तर
    सत्तर इकहत्तर बहत्तर तिहत्तर चौहत्तर पचहत्तर छिहत्तर सतहत्तर अठहत्तर उन्यासी
    अस्सी इक्यासी बयासी तिरासी चौरासी पचासी छियासी सतासी अट्ठासी नवासी
    नब्बे इक्यानबे बानबे तिरानबे चौरानबे पंचानबे छियानवे सत्तानबे अठ्ठानवे निन्यानवे
    """.split()
)

_HUNDRED = "सौ"

_SCALES: dict[str, UnitForms] = {
    "thousand": UnitForms(singular="हज़ार"),
    "lakh": UnitForms(singular="लाख"),
    "crore": UnitForms(singular="करोड़"),
    "arab": UnitForms(singular="अरब"),
    "kharab": UnitForms(singular="खरब"),
    "neel": UnitForms(singular="नील"),
    "padma": UnitForms(singular="पद्म"),
    "shankh": UnitForms(singular="शंख"),
}


class HindiWords:
    code = "hi"

    def __init__(self, magnitude=INDIC):
        self.magnitude = magnitude

    def chunk(self, n: int) -> list[str]:
        """Words for 1-999."""
        hundreds, rest = divmod(n, 100)
        words: list[str] = []
        if hundreds:
            words += [_BELOW_100[hundreds], _HUNDRED]
        if rest:
            words.append(_BELOW_100[rest])
        return words

    def render_group(self, value, context, scale_level, options):
        words = self.chunk(value)
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
        # Whole centuries only: 1900 → "उन्नीस सौ"
        if 1100 <= year < 2000 and year % 100 == 0:
            return [_BELOW_100[year // 100], _HUNDRED]
        return None


BINDING = LocaleBinding(
    code="hi",
    name="हिन्दी",
    magnitude=INDIC,
    selector=NumeralClassSelector(ONE_OTHER),
    words=HindiWords(),
    tokens=LocaleTokens(
        zero="शून्य",
        digits=_BELOW_100[:10],
        negative="ऋण",
        separators={
            DecimalSeparatorStyle.POINT: "दशमलव",
            DecimalSeparatorStyle.PERIOD: "दशमलव",
            DecimalSeparatorStyle.COMMA: "अल्पविराम",
        },
        default_separator=DecimalSeparatorStyle.POINT,
        not_a_number="अमान्य संख्या",
        infinity="अनंत",
        negative_infinity="ऋण अनंत",
        era_bc="ईसा पूर्व",
        era_ad="ईस्वी",
        currency_conjunction="और",
        omit_zero_major=True,
    ),
    default_currency=INR_HI,
)
