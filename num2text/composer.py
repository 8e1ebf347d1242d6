"""
Phrase composer: turns a CanonicalNumber into the final string.

Flow for one call:

    CanonicalNumber
        │
        ├── special? ──────────────► fixed locale token
        │
        ├── integer part ─► decompose() ─► classify each group
        │                                   ─► provider.render_group()
        │                                   ─► provider.join_groups()
        ├── fraction ─────► separator word + digit words (or one integer)
        ├── currency ─────► major count + unit [+ conjunction + minor count + unit]
        ├── year ─────────► provider.render_year() or cardinal, era, year marker
        │
        └── sign prefix, then join with the locale joiner

The composer owns no locale knowledge. It only decides which pieces
appear and in what order; every word comes from the binding.
"""

from __future__ import annotations

from dataclasses import replace

from .digits import int_to_digits
from .locales.base import LocaleBinding
from .magnitude import decompose
from .models import (
    CanonicalNumber,
    CurrencyInfo,
    FractionReading,
    Gender,
    OutputMode,
    RenderOptions,
    Role,
    SpecialValue,
    UnitForms,
)


def split_amount(
    number: CanonicalNumber, currency: CurrencyInfo, round_half_up: bool = False
) -> tuple[int, int]:
    """Split a non-negative amount into (major, minor) units.

    Extra fractional digits are truncated, or rounded half-up when asked.
    Rounding may carry into the major amount (0.999 → 1, 0).
    """
    places = currency.minor_digits if currency.minor is not None else 0
    fraction = number.fractional_digits.ljust(places + 1, "0")
    major = number.integer_value
    minor = int(fraction[:places] or "0")
    if round_half_up and fraction[places] >= "5":
        minor += 1
        if minor == 10**places:
            major, minor = major + 1, 0
    return major, minor


class PhraseComposer:
    """Composes output for one locale. Stateless; safe to share."""

    def __init__(self, binding: LocaleBinding):
        self.binding = binding
        self.words = binding.words
        self.tokens = binding.tokens

    def compose(self, number: CanonicalNumber, options: RenderOptions) -> str:
        if number.is_special:
            return self.special_token(number.special)

        if options.mode is OutputMode.YEAR:
            words = self._year(number, options)
        elif options.mode is OutputMode.CURRENCY:
            words = self._currency(number, options)
        else:
            words = self._plain(number, options)
        return self.join(words)

    def special_token(self, special: SpecialValue) -> str:
        return {
            SpecialValue.NOT_A_NUMBER: self.tokens.not_a_number,
            SpecialValue.POSITIVE_INFINITY: self.tokens.infinity,
            SpecialValue.NEGATIVE_INFINITY: self.tokens.negative_infinity,
        }[special]

    def join(self, words: list[str]) -> str:
        joiner = self.tokens.joiner
        text = joiner.join(w for w in words if w)
        if joiner == " ":
            return " ".join(text.split())
        return text.strip()

    # ─── Integer Part ───────────────────────────────────────────────

    def render_integer(
        self, n: int | str, role: Role, gender: Gender, options: RenderOptions
    ) -> list[str]:
        """Words for a non-negative integer or digit string, scale words included."""
        digits = n if isinstance(n, str) else int_to_digits(n)
        if not digits.strip("0"):
            return [self.tokens.zero]

        binding = self.binding
        parts: list[list[str]] = []
        for group in decompose(digits, binding.magnitude):
            if group.is_trailing_zero_group:
                continue
            # Units inside a recursive block count the outer tier's noun
            base = gender
            if group.enclosing:
                base = binding.gender_for(group.enclosing[-1], gender)
            context = binding.classify(group.value, role, group.scale_level, base)
            if group.closes:
                context = replace(context, before_noun=True)
            words = self.words.render_group(
                group.value, context, group.scale_level, options
            )
            for level, quantity in group.closes:
                outer = binding.classify(quantity, role, level, gender)
                words = words + self.words.scale_word(level, outer)
            parts.append(words)
        return self.words.join_groups(parts)

    # ─── Plain Numbers ──────────────────────────────────────────────

    def _plain(self, number: CanonicalNumber, options: RenderOptions) -> list[str]:
        gender = self._base_gender(options)
        words = self.render_integer(
            number.integer_digits, Role.CARDINAL, gender, options
        )
        if number.fractional_digits:
            words += self._fraction(number.fractional_digits, gender, options)
        if number.is_negative:
            words = [self._negative(options)] + words
        return words

    def _fraction(
        self, digits: str, gender: Gender, options: RenderOptions
    ) -> list[str]:
        style = options.decimal_separator or self.tokens.default_separator
        words = [self.tokens.separators[style]]
        if options.fraction_reading is FractionReading.INTEGER:
            significant = digits.lstrip("0")
            words += [self.tokens.digits[0]] * (len(digits) - len(significant))
            words += self.render_integer(significant, Role.CARDINAL, gender, options)
        else:
            words += [self.tokens.digits[int(d)] for d in digits]
        return words

    # ─── Currency ───────────────────────────────────────────────────

    def _currency(self, number: CanonicalNumber, options: RenderOptions) -> list[str]:
        currency = options.currency or self.binding.default_currency
        major, minor = split_amount(number, currency, options.round)

        parts: list[list[str]] = []
        if major or not minor or not self.tokens.omit_zero_major:
            parts.append(
                self._counted(
                    major,
                    Role.CURRENCY_MAJOR,
                    currency.major,
                    currency.major_gender,
                    options,
                )
            )
        if currency.minor is not None and (minor or options.include_zero_minor):
            parts.append(
                self._counted(
                    minor,
                    Role.CURRENCY_MINOR,
                    currency.minor,
                    currency.minor_gender,
                    options,
                )
            )

        conjunction = currency.separator or self.tokens.currency_conjunction
        words = self.words.join_groups(parts, conjunction)
        if number.is_negative and (major or minor):
            words = [self._negative(options)] + words
        return words

    def _counted(
        self,
        amount: int,
        role: Role,
        forms: UnitForms,
        gender: Gender,
        options: RenderOptions,
    ) -> list[str]:
        context = self.binding.classify(amount, role, 0, gender)
        count = self.render_integer(amount, role, gender, options)
        return self.words.attach_unit(count, forms, context)

    # ─── Years ──────────────────────────────────────────────────────

    def _year(self, number: CanonicalNumber, options: RenderOptions) -> list[str]:
        year = number.integer_value  # fractional years are truncated
        if year == 0:
            body = [self.tokens.zero]
        else:
            cardinal = self.render_integer(
                year, Role.YEAR, self._base_gender(options), options
            )
            body = self.words.render_year(year, cardinal, options) or cardinal

        if self.tokens.year_marker:
            body = body + [self.tokens.year_marker]

        era = None
        if number.is_negative and year:
            era = self.tokens.era_bc
        elif options.include_era_suffix and year:
            era = self.tokens.era_ad
        if era is None:
            return body
        if self.tokens.era_position == "prefix":
            return [era] + body
        return body + [era]

    # ─── Helpers ────────────────────────────────────────────────────

    def _negative(self, options: RenderOptions) -> str:
        if options.negative_prefix is not None:
            return options.negative_prefix
        return self.tokens.negative

    def _base_gender(self, options: RenderOptions) -> Gender:
        return options.gender or self.binding.default_gender
