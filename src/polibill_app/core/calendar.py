"""Gregorian date helpers and the injectable clock."""

from __future__ import annotations

import datetime
import re
from dataclasses import dataclass
from typing import Protocol

DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


@dataclass(frozen=True, order=True)
class Date:
    """Proleptic Gregorian calendar date on plain integers.

    Unlike `datetime.date`, any year is representable, including 0000 and
    years past 9999 reached by long policy terms.
    """

    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, value: datetime.date) -> "Date":
        return cls(value.year, value.month, value.day)


class Clock(Protocol):
    """Source of the current calendar date."""

    def today(self) -> Date:
        ...


class SystemClock:
    """Clock backed by the local system date."""

    def today(self) -> Date:
        return Date.from_date(datetime.date.today())


@dataclass(frozen=True)
class FixedClock:
    """Clock that always returns the same date."""

    current: Date

    def today(self) -> Date:
        return self.current


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a month of a given year."""
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def parse_date(text: str) -> Date | None:
    """Parse strict YYYY-MM-DD text, returning None when it is not a valid date."""
    if not DATE_PATTERN.match(text):
        return None
    year, month, day = int(text[0:4]), int(text[5:7]), int(text[8:10])
    if month < 1 or month > 12:
        return None
    if day < 1 or day > days_in_month(year, month):
        return None
    return Date(year, month, day)


def format_date(value: Date) -> str:
    """Render a date as YYYY-MM-DD; years past 9999 keep all their digits."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def add_months(value: Date, months: int) -> Date:
    """Add whole months, clamping the day to the end of the target month."""
    index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    return Date(year, month, min(value.day, days_in_month(year, month)))


def compare_dates(left: Date, right: Date) -> int:
    """Return -1, 0 or 1 ordering two dates."""
    if left < right:
        return -1
    if left > right:
        return 1
    return 0
