"""Tests for input parsing rules."""

import sys
from decimal import Decimal

import pytest

from polibill_app.core.validation import (
    is_number,
    is_usable_amount,
    parse_lenient_decimal,
    parse_non_negative_decimal,
    parse_non_negative_int,
)


def test_is_number_accepts_only_ascii_digits() -> None:
    assert is_number("0042")
    assert not is_number("")
    assert not is_number("-1")
    assert not is_number("1.0")
    assert not is_number(" 1")


def test_parse_non_negative_int() -> None:
    assert parse_non_negative_int("12") == 12
    assert parse_non_negative_int("12a") is None


def test_parse_lenient_decimal_reads_numeric_prefix() -> None:
    assert parse_lenient_decimal("100.50") == Decimal("100.50")
    assert parse_lenient_decimal("  7.5abc") == Decimal("7.5")
    assert parse_lenient_decimal("-20") == Decimal("-20")
    assert parse_lenient_decimal("1e2") == Decimal("100")
    assert parse_lenient_decimal("abc") == Decimal("0")
    assert parse_lenient_decimal("") == Decimal("0")


def test_parse_non_negative_decimal() -> None:
    assert parse_non_negative_decimal(" 120.25 ") == Decimal("120.25")
    assert parse_non_negative_decimal("-1") is None
    assert parse_non_negative_decimal("12x") is None
    assert parse_non_negative_decimal("NaN") is None
    assert parse_non_negative_decimal("Infinity") is None


def test_amounts_outside_billing_range_are_rejected() -> None:
    assert parse_lenient_decimal("1e999999") == Decimal("0")
    assert parse_lenient_decimal("1e-999999") == Decimal("0")
    assert parse_lenient_decimal("1e16") == Decimal("0")
    assert parse_lenient_decimal("9999999999999999") == Decimal("9999999999999999")
    assert parse_lenient_decimal("0.000000000000001") == Decimal("0.000000000000001")
    assert parse_non_negative_decimal("1e999999") is None
    assert parse_non_negative_decimal("0.0000000000000001") is None
    assert parse_non_negative_decimal("0") == Decimal("0")


def test_is_usable_amount() -> None:
    assert is_usable_amount(Decimal("-250.75"))
    assert is_usable_amount(Decimal("0E-50"))
    assert not is_usable_amount(Decimal("Infinity"))
    assert not is_usable_amount(Decimal("1E+16"))


@pytest.mark.skipif(not getattr(sys, "get_int_max_str_digits", lambda: 0)(), reason="no int digit limit")
def test_parse_non_negative_int_past_digit_limit() -> None:
    assert parse_non_negative_int("9" * (sys.get_int_max_str_digits() + 1)) is None
