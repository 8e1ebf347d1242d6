"""
Magnitude models and the group decomposer.

A magnitude model names the tiers of a scale system (thousand, million, …
or 万, 億, … or lakh, crore, …) and says how many digits each tier holds.
``decompose`` splits an arbitrary-precision integer into groups along
those tiers, most significant first.

Numbers beyond the largest named tier are decomposed recursively: the
amount of the top tier is itself split into groups, and the top-tier word
is spoken after the last non-zero group of that inner block
("one thousand septillion", "दस शंख", "一万秭").
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional

from .digits import digits_to_int, int_to_digits
from .exceptions import UnsupportedMagnitudeError
from .models import NumberGroup

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MagnitudeModel:
    """Scale ladder of one locale.

    ``scale_keys[0]`` is the units tier and is always ``""``. When
    ``group_boundaries`` is given it lists the digit offset at which each
    tier starts and overrides ``group_size``; the top tier then keeps the
    width of the step below it.
    """

    name: str
    group_size: int
    scale_keys: tuple[str, ...]
    group_boundaries: Optional[tuple[int, ...]] = None
    recursive: bool = True

    def __post_init__(self):
        if self.group_size < 1:
            raise UnsupportedMagnitudeError(
                f"{self.name}: group size must be positive",
                details={"group_size": self.group_size},
            )
        if not self.scale_keys or self.scale_keys[0] != "":
            raise UnsupportedMagnitudeError(
                f"{self.name}: the first scale key must be the units tier ''",
                details={"scale_keys": list(self.scale_keys)},
            )
        if self.group_boundaries is not None:
            b = self.group_boundaries
            if len(b) != len(self.scale_keys):
                raise UnsupportedMagnitudeError(
                    f"{self.name}: {len(b)} boundaries for "
                    f"{len(self.scale_keys)} scale keys",
                )
            if b[0] != 0 or any(lo >= hi for lo, hi in zip(b, b[1:])):
                raise UnsupportedMagnitudeError(
                    f"{self.name}: boundaries must start at 0 and increase",
                    details={"group_boundaries": list(b)},
                )

    @property
    def top_level(self) -> int:
        return len(self.scale_keys) - 1

    def offset(self, level: int) -> int:
        """Digit offset (decimal exponent) where ``level`` starts."""
        if self.group_boundaries is not None:
            return self.group_boundaries[level]
        return level * self.group_size

    def width(self, level: int) -> int:
        """Number of digits held by ``level``."""
        b = self.group_boundaries
        if b is None:
            return self.group_size
        if level < len(b) - 1:
            return b[level + 1] - b[level]
        if len(b) == 1:
            return self.group_size
        return b[-1] - b[-2]

    def truncated(self, top_key: str) -> "MagnitudeModel":
        """Copy of this model whose ladder ends at ``top_key``."""
        end = self.scale_keys.index(top_key) + 1
        bounds = self.group_boundaries[:end] if self.group_boundaries else None
        return replace(self, scale_keys=self.scale_keys[:end], group_boundaries=bounds)


# ─── Predefined Ladders ─────────────────────────────────────────────

SHORT_SCALE = MagnitudeModel(
    name="short",
    group_size=3,
    scale_keys=(
        "",
        "thousand",
        "million",
        "billion",
        "trillion",
        "quadrillion",
        "quintillion",
        "sextillion",
        "septillion",
        "octillion",
        "nonillion",
        "decillion",
        "undecillion",
        "duodecillion",
        "tredecillion",
        "quattuordecillion",
        "quindecillion",
    ),
)

# Six-digit groups; the thousands inside a group are rendered by the locale
LONG_SCALE = MagnitudeModel(
    name="long",
    group_size=6,
    scale_keys=("", "million", "billion", "trillion", "quadrillion"),
)

MYRIAD = MagnitudeModel(
    name="myriad",
    group_size=4,
    scale_keys=("", "man", "oku", "cho", "kei", "gai", "jo"),
)

# 3 digits for the units group, then 2 per tier
INDIC = MagnitudeModel(
    name="indic",
    group_size=2,
    scale_keys=(
        "",
        "thousand",
        "lakh",
        "crore",
        "arab",
        "kharab",
        "neel",
        "padma",
        "shankh",
    ),
    group_boundaries=(0, 3, 5, 7, 9, 11, 13, 15, 17),
)


# ─── Decomposition ──────────────────────────────────────────────────


def decompose(integer_digits: str | int, model: MagnitudeModel) -> list[NumberGroup]:
    """Split a non-negative integer into groups, most significant first.

    The digit string is sliced from the right, so the cost is linear in
    the number of digits. Zero-valued groups are kept and flagged
    ``is_trailing_zero_group`` so the decomposition always sums back to
    the input. Zero itself yields a single zero group.

    Raises:
        UnsupportedMagnitudeError: if the number exceeds the top tier of a
            non-recursive model.
    """
    if isinstance(integer_digits, int):
        if integer_digits < 0:
            raise ValueError("decompose() takes a magnitude, not a signed value")
        integer_digits = int_to_digits(integer_digits)
    elif not integer_digits.isdigit():
        raise ValueError(f"not a digit string: {integer_digits[:20]!r}")

    digits = integer_digits.lstrip("0")
    if not digits:
        return [NumberGroup(value=0, scale_level=0, power=0, is_trailing_zero_group=True)]

    top = model.top_level
    groups: list[NumberGroup] = []  # least significant first
    # (index of the block's first group, top level, amount of that tier)
    blocks: list[tuple[int, int, str]] = []
    enclosing: tuple[int, ...] = ()
    base_power = 0

    while digits:
        level = 0
        while digits and level < top:
            width = model.width(level)
            digits, chunk = digits[:-width].lstrip("0"), digits[-width:]
            value = int(chunk)
            groups.append(
                NumberGroup(
                    value=value,
                    scale_level=level,
                    power=base_power + model.offset(level),
                    is_trailing_zero_group=value == 0,
                    enclosing=enclosing,
                )
            )
            level += 1
        if not digits:
            break

        if len(digits) <= model.width(top):
            groups.append(
                NumberGroup(
                    value=int(digits),
                    scale_level=top,
                    power=base_power + model.offset(top),
                    enclosing=enclosing,
                )
            )
            break

        # The top tier's amount is itself spelled out as an inner block
        if not model.recursive:
            raise UnsupportedMagnitudeError(
                f"Number exceeds the '{model.scale_keys[-1]}' tier of the "
                f"{model.name} scale",
                details={"model": model.name, "digits": len(integer_digits)},
            )
        logger.debug(
            "Recursing past %s tier of %s scale", model.scale_keys[-1], model.name
        )
        blocks.append((len(groups), top, digits))
        enclosing += (top,)
        base_power += model.offset(top)

    # The tier word follows the last non-zero group of its block; inner
    # blocks close first
    for start, level, amount in reversed(blocks):
        i = next(i for i in range(start, len(groups)) if groups[i].value)
        closing = (level, digits_to_int(amount))
        groups[i] = replace(groups[i], closes=groups[i].closes + (closing,))

    groups.reverse()
    return groups
