"""
Word-level fixtures for every shipped language.

Each class pins plain numbers, fractions, currency and years for one
locale. Expected strings are what a native reader would write.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from num2text.currencies import GBP
from num2text.models import (
    DecimalSeparatorStyle,
    FractionReading,
    Gender,
    OutputMode,
    RenderOptions,
)

CURRENCY = OutputMode.CURRENCY
YEAR = OutputMode.YEAR


# ═══════════════════════════════════════════════════════════════════════
# ENGLISH
# ═══════════════════════════════════════════════════════════════════════


class TestEnglish:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "zero"),
            (1, "one"),
            (13, "thirteen"),
            (21, "twenty-one"),
            (40, "forty"),
            (100, "one hundred"),
            (101, "one hundred one"),
            (1000, "one thousand"),
            (1001, "one thousand one"),
            (123_456, "one hundred twenty-three thousand four hundred fifty-six"),
            (1_000_000, "one million"),
            (2_000_000_005, "two billion five"),
            (10**24, "one septillion"),
            (10**48, "one quindecillion"),
        ],
    )
    def test_cardinals(self, to_words, value, expected):
        assert to_words(value) == expected

    def test_beyond_largest_scale(self, to_words):
        assert to_words(10**51) == "one thousand quindecillion"
        assert to_words(10**54) == "one million quindecillion"

    def test_include_and(self, to_words):
        assert to_words(123, include_and=True) == "one hundred and twenty-three"
        assert to_words(100, include_and=True) == "one hundred"

    def test_negative(self, to_words):
        assert to_words(-123) == "minus one hundred twenty-three"
        assert to_words("-0.5") == "minus zero point five"

    @pytest.mark.parametrize(
        "value, options, expected",
        [
            ("1.5", {}, "one point five"),
            ("1.05", {}, "one point zero five"),
            (Decimal("3.14"), {}, "three point one four"),
            ("1.5", {"decimal_separator": DecimalSeparatorStyle.COMMA}, "one comma five"),
            ("1.5", {"decimal_separator": DecimalSeparatorStyle.PERIOD}, "one point five"),
            ("1.25", {"fraction_reading": FractionReading.INTEGER}, "one point twenty-five"),
            ("1.05", {"fraction_reading": FractionReading.INTEGER}, "one point zero five"),
        ],
    )
    def test_fractions(self, to_words, value, options, expected):
        assert to_words(value, **options) == expected

    @pytest.mark.parametrize(
        "value, options, expected",
        [
            (0, {}, "zero dollars"),
            (1, {}, "one dollar"),
            ("1.01", {}, "one dollar and one cent"),
            ("2.50", {}, "two dollars and fifty cents"),
            ("0.50", {}, "zero dollars and fifty cents"),
            ("1.999", {}, "one dollar and ninety-nine cents"),
            ("1.999", {"round": True}, "two dollars"),
            (5, {"include_zero_minor": True}, "five dollars and zero cents"),
            ("-5.25", {}, "minus five dollars and twenty-five cents"),
            (
                "135.75",
                {"currency": GBP, "include_and": True},
                "one hundred and thirty-five pounds and seventy-five pence",
            ),
        ],
    )
    def test_currency(self, to_words, value, options, expected):
        assert to_words(value, mode=CURRENCY, **options) == expected

    @pytest.mark.parametrize(
        "value, options, expected",
        [
            (1984, {}, "nineteen eighty-four"),
            (1900, {}, "nineteen hundred"),
            (1905, {}, "nineteen hundred five"),
            (1905, {"include_and": True}, "nineteen hundred and five"),
            (2000, {}, "two thousand"),
            (2005, {}, "two thousand five"),
            (2005, {"include_and": True}, "two thousand and five"),
            (2024, {}, "twenty twenty-four"),
            (2024, {"include_era_suffix": True}, "twenty twenty-four AD"),
            (1066, {}, "one thousand sixty-six"),
            (-500, {}, "five hundred BC"),
            (-500, {"include_era_suffix": True}, "five hundred BC"),
            (0, {}, "zero"),
            ("1984.7", {}, "nineteen eighty-four"),
        ],
    )
    def test_years(self, to_words, value, options, expected):
        assert to_words(value, mode=YEAR, **options) == expected

    def test_special_values(self, to_words):
        assert to_words(float("nan")) == "Not a Number"
        assert to_words(float("inf")) == "Infinity"
        assert to_words(float("-inf")) == "Negative Infinity"


# ═══════════════════════════════════════════════════════════════════════
# RUSSIAN
# ═══════════════════════════════════════════════════════════════════════


class TestRussian:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "ноль"),
            (1, "один"),
            (2, "два"),
            (11, "одиннадцать"),
            (40, "сорок"),
            (1000, "одна тысяча"),
            (2000, "две тысячи"),
            (5000, "пять тысяч"),
            (11_000, "одиннадцать тысяч"),
            (21_000, "двадцать одна тысяча"),
            (1_000_000, "один миллион"),
            (2_000_000, "два миллиона"),
            (5_000_000, "пять миллионов"),
            (123_456, "сто двадцать три тысячи четыреста пятьдесят шесть"),
            (10**24, "один септиллион"),
            (10**27, "одна тысяча септиллионов"),
        ],
    )
    def test_cardinals(self, to_words, value, expected):
        assert to_words(value, "ru") == expected

    @pytest.mark.parametrize(
        "value, gender, expected",
        [
            (1, Gender.FEMININE, "одна"),
            (22, Gender.FEMININE, "двадцать две"),
            (1, Gender.NEUTER, "одно"),
            (2, Gender.NEUTER, "два"),
            (2_000_001, Gender.FEMININE, "два миллиона одна"),
        ],
    )
    def test_gender(self, to_words, value, gender, expected):
        assert to_words(value, "ru", gender=gender) == expected

    def test_fractions(self, to_words):
        assert to_words("1.5", "ru") == "один запятая пять"
        point = DecimalSeparatorStyle.POINT
        assert to_words("1.5", "ru", decimal_separator=point) == "один точка пять"

    def test_negative(self, to_words):
        assert to_words(-123, "ru") == "минус сто двадцать три"

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "ноль рублей"),
            (1, "один рубль"),
            (2, "два рубля"),
            (5, "пять рублей"),
            (21, "двадцать один рубль"),
            ("1.50", "один рубль пятьдесят копеек"),
            ("2.02", "два рубля две копейки"),
            ("0.01", "одна копейка"),
            ("0.50", "пятьдесят копеек"),
        ],
    )
    def test_currency(self, to_words, value, expected):
        assert to_words(value, "ru", mode=CURRENCY) == expected

    @pytest.mark.parametrize(
        "value, options, expected",
        [
            (2024, {}, "две тысячи двадцать четвёртый"),
            (1984, {}, "тысяча девятьсот восемьдесят четвёртый"),
            (1941, {}, "тысяча девятьсот сорок первый"),
            (1900, {}, "тысяча девятисотый"),
            (1000, {}, "тысячный"),
            (2000, {}, "двухтысячный"),
            (1, {}, "первый"),
            (-100, {}, "сотый до н. э."),
            (2024, {"include_era_suffix": True}, "две тысячи двадцать четвёртый н. э."),
        ],
    )
    def test_years(self, to_words, value, options, expected):
        assert to_words(value, "ru", mode=YEAR, **options) == expected

    def test_special_values(self, to_words):
        assert to_words(float("inf"), "ru") == "Бесконечность"
        assert to_words(float("-inf"), "ru") == "Минус бесконечность"


# ═══════════════════════════════════════════════════════════════════════
# SPANISH
# ═══════════════════════════════════════════════════════════════════════


class TestSpanish:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "cero"),
            (1, "uno"),
            (16, "dieciséis"),
            (21, "veintiuno"),
            (31, "treinta y uno"),
            (100, "cien"),
            (101, "ciento uno"),
            (500, "quinientos"),
            (1000, "mil"),
            (2000, "dos mil"),
            (21_000, "veintiún mil"),
            (31_000, "treinta y un mil"),
            (100_000, "cien mil"),
            (1_000_000, "un millón"),
            (2_000_000, "dos millones"),
            (10**9, "mil millones"),
            (10**12, "un billón"),
            (
                1_234_567,
                "un millón doscientos treinta y cuatro mil quinientos sesenta y siete",
            ),
        ],
    )
    def test_cardinals(self, to_words, value, expected):
        assert to_words(value, "es") == expected

    def test_apocope_before_outer_scale_word(self, to_words):
        # The units group of a block past cuatrillón still precedes a noun
        assert to_words(1_000_021 * 10**24, "es") == "un millón veintiún cuatrillones"
        assert to_words(21 * 10**24, "es") == "veintiún cuatrillones"

    def test_fractions(self, to_words):
        assert to_words("1.05", "es") == "uno coma cero cinco"
        point = DecimalSeparatorStyle.POINT
        assert to_words("1.05", "es", decimal_separator=point) == "uno punto cero cinco"

    def test_negative(self, to_words):
        assert to_words(-5, "es") == "menos cinco"

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, "un euro"),
            (21, "veintiún euros"),
            ("1.50", "un euro con cincuenta céntimos"),
            ("2.01", "dos euros con un céntimo"),
            ("0.01", "un céntimo"),
            (0, "cero euros"),
        ],
    )
    def test_currency(self, to_words, value, expected):
        assert to_words(value, "es", mode=CURRENCY) == expected

    def test_years(self, to_words):
        assert to_words(1984, "es", mode=YEAR) == "mil novecientos ochenta y cuatro"
        assert to_words(-44, "es", mode=YEAR) == "cuarenta y cuatro a.C."
        assert to_words(2024, "es", mode=YEAR, include_era_suffix=True) == "dos mil veinticuatro d.C."


# ═══════════════════════════════════════════════════════════════════════
# JAPANESE
# ═══════════════════════════════════════════════════════════════════════


class TestJapanese:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "ゼロ"),
            (10, "十"),
            (11, "十一"),
            (100, "百"),
            (300, "三百"),
            (1000, "千"),
            (3000, "三千"),
            (10_000, "一万"),
            (12_345, "一万二千三百四十五"),
            (1_000_000, "百万"),
            (10_000_000, "千万"),
            (10**8, "一億"),
            (123_456_789, "一億二千三百四十五万六千七百八十九"),
            (10**28, "一万秭"),
        ],
    )
    def test_cardinals(self, to_words, value, expected):
        assert to_words(value, "ja") == expected

    def test_fractions(self, to_words):
        assert to_words("1.5", "ja") == "一点五"
        assert to_words("1.05", "ja") == "一点〇五"

    def test_negative(self, to_words):
        assert to_words(-5, "ja") == "マイナス五"

    def test_currency(self, to_words):
        assert to_words(1000, "ja", mode=CURRENCY) == "千円"
        assert to_words("1.99", "ja", mode=CURRENCY) == "一円"
        assert to_words(0, "ja", mode=CURRENCY) == "ゼロ円"

    def test_years(self, to_words):
        assert to_words(2024, "ja", mode=YEAR) == "二千二十四年"
        assert to_words(2024, "ja", mode=YEAR, include_era_suffix=True) == "西暦二千二十四年"
        assert to_words(-500, "ja", mode=YEAR) == "紀元前五百年"
        assert to_words(0, "ja", mode=YEAR) == "ゼロ年"


# ═══════════════════════════════════════════════════════════════════════
# HINDI
# ═══════════════════════════════════════════════════════════════════════


class TestHindi:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "शून्य"),
            (99, "निन्यानवे"),
            (100, "एक सौ"),
            (1000, "एक हज़ार"),
            (100_000, "एक लाख"),
            (10_000_000, "एक करोड़"),
            (123_456_789, "बारह करोड़ चौंतीस लाख छप्पन हज़ार सात सौ नवासी"),
            (10**18, "दस शंख"),
            (10**19, "एक सौ शंख"),
        ],
    )
    def test_cardinals(self, to_words, value, expected):
        assert to_words(value, "hi") == expected

    def test_fractions(self, to_words):
        assert to_words("1.5", "hi") == "एक दशमलव पाँच"

    def test_negative(self, to_words):
        assert to_words(-5, "hi") == "ऋण पाँच"

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, "एक रुपया"),
            (2, "दो रुपये"),
            ("1.50", "एक रुपया और पचास पैसे"),
            ("0.01", "एक पैसा"),
        ],
    )
    def test_currency(self, to_words, value, expected):
        assert to_words(value, "hi", mode=CURRENCY) == expected

    def test_years(self, to_words):
        assert to_words(1900, "hi", mode=YEAR) == "उन्नीस सौ"
        assert to_words(1984, "hi", mode=YEAR) == "एक हज़ार नौ सौ चौरासी"
        assert to_words(-100, "hi", mode=YEAR) == "एक सौ ईसा पूर्व"


# ═══════════════════════════════════════════════════════════════════════
# ARABIC
# ═══════════════════════════════════════════════════════════════════════


class TestArabic:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "صفر"),
            (1, "واحد"),
            (2, "اثنان"),
            (11, "أحد عشر"),
            (21, "واحد وعشرون"),
            (100, "مئة"),
            (105, "مئة وخمسة"),
            (1000, "ألف"),
            (1001, "ألف وواحد"),
            (2000, "ألفان"),
            (3000, "ثلاثة آلاف"),
            (11_000, "أحد عشر ألفًا"),
            (100_000, "مئة ألف"),
            (123_456, "مئة وثلاثة وعشرون ألفًا وأربعمئة وستة وخمسون"),
            (1_000_000, "مليون"),
            (2_000_000, "مليونان"),
        ],
    )
    def test_cardinals(self, to_words, value, expected):
        assert to_words(value, "ar") == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, "واحدة"),
            (3, "ثلاث"),
            (21, "إحدى وعشرون"),
            (3000, "ثلاثة آلاف"),
            (1001, "ألف وواحدة"),
        ],
    )
    def test_feminine(self, to_words, value, expected):
        assert to_words(value, "ar", gender=Gender.FEMININE) == expected

    def test_fractions(self, to_words):
        assert to_words("1.5", "ar") == "واحد فاصلة خمسة"
        point = DecimalSeparatorStyle.POINT
        assert to_words("1.5", "ar", decimal_separator=point) == "واحد نقطة خمسة"

    def test_negative(self, to_words):
        assert to_words(-5, "ar") == "سالب خمسة"

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("1.50", "واحد ريال سعودي وخمسون هللة"),
            (5, "خمسة ريالات سعودية"),
            ("123.05", "مئة وثلاثة وعشرون ريالاً سعوديًا وخمسة هللات"),
            ("123.02", "مئة وثلاثة وعشرون ريالاً سعوديًا وهللتان"),
            ("123.45", "مئة وثلاثة وعشرون ريالاً سعوديًا وخمس وأربعون هللة"),
            ("0.01", "هللة"),
        ],
    )
    def test_currency(self, to_words, value, expected):
        assert to_words(value, "ar", mode=CURRENCY) == expected

    def test_years(self, to_words):
        assert to_words(1900, "ar", mode=YEAR) == "ألف وتسعمئة"
        assert to_words(-100, "ar", mode=YEAR) == "مئة ق.م"
