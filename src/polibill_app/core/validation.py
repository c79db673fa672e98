"""Input parsing rules shared by record loading and partial updates."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

DIGITS_PATTERN = re.compile(r"^[0-9]+$")
LEADING_NUMBER_PATTERN = re.compile(r"^\s*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
# Amounts must lie within 10**-15 .. 10**16 in magnitude (or be zero) so that
# premium x duration and total / premium stay inside the decimal context.
MAX_AMOUNT_EXPONENT = 15


def is_number(value: str) -> bool:
    """Return True when the text is a non-empty run of ASCII digits."""
    return bool(DIGITS_PATTERN.match(value))


def parse_non_negative_int(value: str) -> int | None:
    """Parse an all-digit integer or return None."""
    if not is_number(value):
        return None
    try:
        return int(value)
    except ValueError:
        # digit runs past the interpreter's int conversion limit
        return None


def is_usable_amount(number: Decimal) -> bool:
    """Return True for finite amounts whose magnitude billing can work with."""
    if not number.is_finite():
        return False
    return number.is_zero() or abs(number.adjusted()) <= MAX_AMOUNT_EXPONENT


def parse_lenient_decimal(value: str) -> Decimal:
    """Parse the leading numeric prefix of the text, falling back to zero."""
    match = LEADING_NUMBER_PATTERN.match(value)
    if not match:
        return Decimal("0")
    try:
        number = Decimal(match.group(0).strip())
    except InvalidOperation:
        return Decimal("0")
    return number if is_usable_amount(number) else Decimal("0")


def parse_non_negative_decimal(value: str) -> Decimal | None:
    """Parse a complete, usable, non-negative decimal or return None."""
    try:
        number = Decimal(value.strip())
    except InvalidOperation:
        return None
    if not is_usable_amount(number) or number < 0:
        return None
    return number
