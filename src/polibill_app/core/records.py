"""Delimited record helpers for the flat-file stores.

Fields are joined with a vertical bar and never escaped: a delimiter inside a
free-text field splits it into extra fields when the line is read back.
"""

from __future__ import annotations

from decimal import Decimal

DELIMITER = "|"


def split_record(line: str) -> list[str]:
    """Split one record line into its raw fields."""
    return line.split(DELIMITER)


def join_record(fields: list[str]) -> str:
    """Join fields into one record line."""
    return DELIMITER.join(fields)


def render_decimal(value: Decimal) -> str:
    """Render a decimal without rounding."""
    return str(value)
