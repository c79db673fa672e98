"""Policy domain model."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from polibill_app.core.calendar import Date, format_date, parse_date
from polibill_app.core.errors import RecordFormatError
from polibill_app.core.records import join_record, render_decimal, split_record
from polibill_app.core.validation import parse_lenient_decimal, parse_non_negative_int

POLICY_MIN_FIELD_COUNT = 5
POLICY_ID_PREFIX = "P"


@dataclass
class Policy:
    """Insurance policy owned by one client and billed monthly."""

    policy_id: str = ""
    type: str = ""
    premium: Decimal = field(default_factory=lambda: Decimal("0"))
    duration: int = 0
    client_id: int = 0
    start_date: str = ""

    @property
    def total_due(self) -> Decimal:
        """Premium owed over the full term."""
        return self.premium * self.duration

    def parsed_start_date(self) -> Date | None:
        return parse_date(self.start_date)

    @classmethod
    def from_record(cls, line: str, today: Date, strict: bool = False) -> "Policy":
        """Build a policy from `policyId|type|premium|duration|clientId|startDate`.

        The start date is optional and defaults to `today`. Premium falls back
        to 0 when it has no numeric prefix; duration and client id fall back
        to 0 unless they are all digits.
        """
        fields = split_record(line)
        if len(fields) < POLICY_MIN_FIELD_COUNT:
            if strict:
                raise RecordFormatError(f"Malformed policy record: {line!r}")
            return cls()
        duration = parse_non_negative_int(fields[3])
        client_id = parse_non_negative_int(fields[4])
        if strict and (duration is None or client_id is None):
            raise RecordFormatError(f"Malformed policy record: {line!r}")
        return cls(
            policy_id=fields[0],
            type=fields[1],
            premium=parse_lenient_decimal(fields[2]),
            duration=duration or 0,
            client_id=client_id or 0,
            start_date=fields[5] if len(fields) > POLICY_MIN_FIELD_COUNT else format_date(today),
        )

    def to_record(self) -> str:
        return join_record(
            [
                self.policy_id,
                self.type,
                render_decimal(self.premium),
                str(self.duration),
                str(self.client_id),
                self.start_date,
            ]
        )


def policy_number(policy_id: str) -> int | None:
    """Return n for ids of the form `P<n>` (either case), else None."""
    if not policy_id or policy_id[0] not in (POLICY_ID_PREFIX, POLICY_ID_PREFIX.lower()):
        return None
    return parse_non_negative_int(policy_id[1:])
