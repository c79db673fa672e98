"""Tests for calendar helpers."""

from __future__ import annotations

import datetime

from polibill_app.core.calendar import (
    Date,
    FixedClock,
    SystemClock,
    add_months,
    compare_dates,
    days_in_month,
    format_date,
    is_leap_year,
    parse_date,
)


def test_parse_and_format_round_trip() -> None:
    for text in ["2024-02-29", "2023-12-31", "0001-01-01", "1999-07-04", "0000-02-29", "0000-01-01"]:
        assert format_date(parse_date(text)) == text


def test_parse_rejects_bad_shapes() -> None:
    for text in ["2024-1-05", "2024/01/05", "24-01-05", "2024-01-5", "2024-01-05 ", "abcd-ef-gh", ""]:
        assert parse_date(text) is None


def test_parse_rejects_out_of_range_values() -> None:
    assert parse_date("2024-13-01") is None
    assert parse_date("2024-00-10") is None
    assert parse_date("2023-02-29") is None
    assert parse_date("2024-04-31") is None
    assert parse_date("2024-01-00") is None


def test_leap_year_rule() -> None:
    assert is_leap_year(2000)
    assert is_leap_year(2024)
    assert not is_leap_year(1900)
    assert not is_leap_year(2023)
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2100, 2) == 28


def test_add_months_clamps_day() -> None:
    assert add_months(Date(2024, 1, 31), 1) == Date(2024, 2, 29)
    assert add_months(Date(2023, 1, 31), 1) == Date(2023, 2, 28)
    assert add_months(Date(2024, 3, 31), 1) == Date(2024, 4, 30)


def test_add_months_carries_years_both_ways() -> None:
    assert add_months(Date(2024, 11, 15), 3) == Date(2025, 2, 15)
    assert add_months(Date(2024, 1, 15), -1) == Date(2023, 12, 15)
    assert add_months(Date(2024, 3, 31), -13) == Date(2023, 2, 28)
    assert add_months(Date(2024, 5, 10), 0) == Date(2024, 5, 10)


def test_compare_dates() -> None:
    assert compare_dates(Date(2024, 1, 1), Date(2024, 1, 2)) == -1
    assert compare_dates(Date(2024, 2, 1), Date(2024, 1, 31)) == 1
    assert compare_dates(Date(2024, 1, 1), Date(2024, 1, 1)) == 0


def test_fixed_clock() -> None:
    assert FixedClock(Date(2024, 6, 1)).today() == Date(2024, 6, 1)


def test_year_zero_is_a_leap_year() -> None:
    assert parse_date("0000-02-29") == Date(0, 2, 29)
    assert add_months(Date(0, 1, 31), 1) == Date(0, 2, 29)


def test_add_months_runs_past_year_9999() -> None:
    end = add_months(Date(2024, 2, 1), 99999)
    assert end == Date(10357, 5, 1)
    assert format_date(end) == "10357-05-01"
    assert compare_dates(Date(9999, 12, 31), end) == -1


def test_system_clock_reports_local_date() -> None:
    today = SystemClock().today()
    assert isinstance(today, Date)
    assert abs(datetime.date(today.year, today.month, today.day) - datetime.date.today()).days <= 1
