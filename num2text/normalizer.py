"""
Value normalizer: heterogeneous numeric input → CanonicalNumber.

Accepted inputs:
    int (any size) and other ``numbers.Integral`` types
    decimal.Decimal, including NaN and ±Infinity
    float, including nan and ±inf
    str holding a decimal numeral ("-1 234.50" is rejected, "-1234.50" is not)

Everything else (None, bool, containers, unparseable text) raises
NotNumericError, as does an exponent that would pad the number with more
than MAX_EXPONENT_PADDING zeros. Whole-valued decimals lose their
fractional part, so ``123.0`` and ``123`` normalize to the same value.
"""

from __future__ import annotations

import math
import numbers
from decimal import Decimal, InvalidOperation

from .digits import int_to_digits
from .exceptions import NotNumericError
from .models import CanonicalNumber, SpecialValue

_NAN = CanonicalNumber(integer_digits="", special=SpecialValue.NOT_A_NUMBER)
_POS_INF = CanonicalNumber(integer_digits="", special=SpecialValue.POSITIVE_INFINITY)
_NEG_INF = CanonicalNumber(integer_digits="", special=SpecialValue.NEGATIVE_INFINITY)

# Zeros an exponent may add beyond the written digits ("1e5000" is fine,
# "1e999999999" is not)
MAX_EXPONENT_PADDING = 100_000


def normalize(value: object) -> CanonicalNumber:
    """Normalize ``value`` or raise NotNumericError."""
    # bool is an Integral subclass but True is not a numeral
    if value is None or isinstance(value, bool):
        raise NotNumericError(
            f"Expected a number, got {value!r}",
            details={"type": type(value).__name__},
        )

    if isinstance(value, Decimal):
        return _from_decimal(value)

    if isinstance(value, numbers.Integral):
        n = int(value)
        digits = int_to_digits(abs(n))
        return CanonicalNumber(sign=-1 if n < 0 else 1, integer_digits=digits)

    if isinstance(value, numbers.Real):
        f = float(value)
        if math.isnan(f):
            return _NAN
        if math.isinf(f):
            return _POS_INF if f > 0 else _NEG_INF
        # repr() gives the shortest string that round-trips, so 0.1 stays 0.1
        return _from_decimal(Decimal(repr(f)))

    if isinstance(value, str):
        return _from_text(value)

    raise NotNumericError(
        f"Unsupported input type: {type(value).__name__}",
        details={"type": type(value).__name__},
    )


def _from_text(text: str) -> CanonicalNumber:
    stripped = text.strip()
    try:
        parsed = Decimal(stripped)
    except InvalidOperation:
        raise NotNumericError(
            f"Cannot parse {text!r} as a number", details={"text": text}
        ) from None
    # Textual "NaN"/"Infinity" is not a numeral
    if not parsed.is_finite():
        raise NotNumericError(
            f"Text {text!r} does not hold a finite number", details={"text": text}
        )
    return _from_decimal(parsed)


def _from_decimal(d: Decimal) -> CanonicalNumber:
    if d.is_nan():
        return _NAN
    if d.is_infinite():
        return _NEG_INF if d.is_signed() else _POS_INF
    if d.is_zero():
        # -0 and 0E-99 are plain zero
        return CanonicalNumber()

    sign, digit_tuple, exponent = d.as_tuple()
    digits = "".join(map(str, digit_tuple))
    padding = exponent if exponent > 0 else max(0, -exponent - len(digits))
    if padding > MAX_EXPONENT_PADDING:
        raise NotNumericError(
            f"Exponent {exponent} is too large to spell out",
            details={"exponent": exponent, "limit": MAX_EXPONENT_PADDING},
        )

    if exponent >= 0:
        int_part, frac_part = digits + "0" * exponent, ""
    elif -exponent >= len(digits):
        int_part, frac_part = "0", digits.rjust(-exponent, "0")
    else:
        int_part, frac_part = digits[:exponent], digits[exponent:]
    int_part = int_part.lstrip("0") or "0"
    frac_part = frac_part.rstrip("0")

    if int_part == "0" and not frac_part:
        return CanonicalNumber()

    return CanonicalNumber(
        sign=-1 if sign else 1,
        integer_digits=int_part,
        fractional_digits=frac_part,
    )
