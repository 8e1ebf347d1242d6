"""
Conversion between integers and decimal digit strings of any length.

``str(n)`` and ``int(s)`` refuse numbers longer than the interpreter's
integer string conversion limit (4300 digits by default). These helpers
split long values in halves so every call to the builtins stays short.
"""

from __future__ import annotations

_CHUNK_DIGITS = 1000
_CHUNK_LIMIT = 10**_CHUNK_DIGITS


def int_to_digits(n: int) -> str:
    """Decimal digits of a non-negative integer, no leading zeros."""
    if n < 0:
        raise ValueError("int_to_digits() takes a magnitude, not a signed value")
    if n < _CHUNK_LIMIT:
        return str(n)
    # floor(log10(2) * bits) never exceeds the real digit count
    half = (n.bit_length() * 30103 // 100000) // 2
    high, low = divmod(n, 10**half)
    return int_to_digits(high) + int_to_digits(low).rjust(half, "0")


def digits_to_int(digits: str) -> int:
    """Inverse of ``int_to_digits``; leading zeros are allowed."""
    if len(digits) <= _CHUNK_DIGITS:
        return int(digits)
    half = len(digits) // 2
    return digits_to_int(digits[:-half]) * 10**half + digits_to_int(digits[-half:])
