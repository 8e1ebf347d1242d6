"""
Currency metadata catalog.

Records are keyed by ISO code and language, since the noun forms belong to
the language rather than the currency (euro cents are "cents" in English
and "céntimos" in Spanish).
"""

from __future__ import annotations

from .exceptions import LocaleTableError
from .models import CurrencyInfo, Gender, UnitForms

USD = CurrencyInfo(
    code="USD",
    symbol="$",
    major=UnitForms(singular="dollar", plural="dollars"),
    minor=UnitForms(singular="cent", plural="cents"),
)

GBP = CurrencyInfo(
    code="GBP",
    symbol="£",
    major=UnitForms(singular="pound", plural="pounds"),
    minor=UnitForms(singular="penny", plural="pence"),
)

EUR_EN = CurrencyInfo(
    code="EUR",
    symbol="€",
    major=UnitForms(singular="euro", plural="euros"),
    minor=UnitForms(singular="cent", plural="cents"),
)

RUB = CurrencyInfo(
    code="RUB",
    symbol="₽",
    major=UnitForms(singular="рубль", few="рубля", many="рублей"),
    minor=UnitForms(singular="копейка", few="копейки", many="копеек"),
    major_gender=Gender.MASCULINE,
    minor_gender=Gender.FEMININE,
)

EUR_ES = CurrencyInfo(
    code="EUR",
    symbol="€",
    major=UnitForms(singular="euro", plural="euros"),
    minor=UnitForms(singular="céntimo", plural="céntimos"),
)

JPY = CurrencyInfo(
    code="JPY",
    symbol="¥",
    major=UnitForms(singular="円"),
    minor=None,
    major_gender=Gender.UNSPECIFIED,
    minor_digits=0,
)

INR_HI = CurrencyInfo(
    code="INR",
    symbol="₹",
    major=UnitForms(singular="रुपया", plural="रुपये"),
    minor=UnitForms(singular="पैसा", plural="पैसे"),
    separator="और",
)

SAR = CurrencyInfo(
    code="SAR",
    symbol="﷼",
    major=UnitForms(
        singular="ريال سعودي",
        few="ريالات سعودية",
        many="ريالاً سعوديًا",
    ),
    minor=UnitForms(
        singular="هللة",
        dual="هللتان",
        few="هللات",
        many="هللة",
    ),
    major_gender=Gender.MASCULINE,
    minor_gender=Gender.FEMININE,
    separator="و",
)

_CATALOG: dict[tuple[str, str], CurrencyInfo] = {
    ("USD", "en"): USD,
    ("GBP", "en"): GBP,
    ("EUR", "en"): EUR_EN,
    ("RUB", "ru"): RUB,
    ("EUR", "es"): EUR_ES,
    ("JPY", "ja"): JPY,
    ("INR", "hi"): INR_HI,
    ("SAR", "ar"): SAR,
}


def get_currency(code: str, lang: str) -> CurrencyInfo:
    """Look up the record for ``code`` spoken in ``lang``."""
    key = (code.strip().upper(), lang.strip().lower())
    try:
        return _CATALOG[key]
    except KeyError:
        raise LocaleTableError(
            f"No {key[0]} currency names for language '{key[1]}'",
            details={"code": key[0], "lang": key[1]},
        ) from None


def available_currencies() -> list[tuple[str, str]]:
    """(code, lang) pairs present in the catalog."""
    return sorted(_CATALOG)
