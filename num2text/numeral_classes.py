"""
Numeral-class selection: which grammatical number a quantity agrees with.

Rules are plain data (``ClassTable``) evaluated by a pure function, so a
locale describes "1 / 2-4 / 5+ except 11-14" as a table rather than as a
chain of conditionals. Checks run in a fixed order:

    1. ``exact``        value equals a listed number
    2. ``ranges``       value lies in an inclusive range
    3. ``teen_range``   value mod 100 lies in the range (teens override digits)
    4. ``last_digit``   value mod 10 is listed
    5. ``default``
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .models import Gender, GrammaticalContext, NumeralClass, Role


@dataclass(frozen=True)
class ClassTable:
    exact: tuple[tuple[int, NumeralClass], ...] = ()
    ranges: tuple[tuple[int, int, NumeralClass], ...] = ()
    teen_range: Optional[tuple[int, int]] = None
    teen_class: NumeralClass = NumeralClass.MANY
    last_digit: tuple[tuple[int, NumeralClass], ...] = ()
    default: NumeralClass = NumeralClass.OTHER

    def select(self, value: int) -> NumeralClass:
        for number, numeral_class in self.exact:
            if value == number:
                return numeral_class
        for low, high, numeral_class in self.ranges:
            if low <= value <= high:
                return numeral_class
        if self.teen_range is not None:
            low, high = self.teen_range
            if low <= value % 100 <= high:
                return self.teen_class
        digit = value % 10
        for number, numeral_class in self.last_digit:
            if digit == number:
                return numeral_class
        return self.default


# ─── Rule Families ──────────────────────────────────────────────────

# English, Spanish, Hindi: "one" vs everything else
ONE_OTHER = ClassTable(exact=((1, NumeralClass.ONE),))

# Russian and other East Slavic languages
SLAVIC = ClassTable(
    teen_range=(11, 14),
    teen_class=NumeralClass.MANY,
    last_digit=(
        (1, NumeralClass.ONE),
        (2, NumeralClass.FEW),
        (3, NumeralClass.FEW),
        (4, NumeralClass.FEW),
    ),
    default=NumeralClass.MANY,
)

# Arabic: singular, dual, 3-10 plural, 11-99 accusative singular
ARABIC_DUAL = ClassTable(
    exact=((1, NumeralClass.ONE), (2, NumeralClass.TWO)),
    ranges=((3, 10, NumeralClass.FEW),),
    teen_range=(11, 99),
    teen_class=NumeralClass.MANY,
)

# Japanese and other languages without grammatical number
INVARIANT = ClassTable()


@dataclass(frozen=True)
class NumeralClassSelector:
    """Locale strategy that turns a group value into a GrammaticalContext.

    ``role_tables`` lets a locale agree differently for, say, currency
    units than for scale words.
    """

    table: ClassTable
    role_tables: tuple[tuple[Role, ClassTable], ...] = field(default=())

    def table_for(self, role: Role) -> ClassTable:
        for table_role, table in self.role_tables:
            if table_role is role:
                return table
        return self.table

    def classify(
        self,
        value: int,
        role: Role = Role.CARDINAL,
        gender: Gender = Gender.UNSPECIFIED,
    ) -> GrammaticalContext:
        if value < 0:
            raise ValueError(f"numeral classes apply to magnitudes, got {value}")
        return GrammaticalContext(
            gender=gender,
            numeral_class=self.table_for(role).select(value),
            role=role,
        )

    __call__ = classify
