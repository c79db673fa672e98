"""Payment domain model."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from polibill_app.core.errors import RecordFormatError
from polibill_app.core.records import join_record, render_decimal, split_record
from polibill_app.core.validation import parse_lenient_decimal

PAYMENT_FIELD_COUNT = 3


@dataclass(frozen=True)
class Payment:
    """Premium payment applied against one policy."""

    policy_id: str = ""
    amount: Decimal = field(default_factory=lambda: Decimal("0"))
    date: str = ""

    @classmethod
    def from_record(cls, line: str, strict: bool = False) -> "Payment":
        """Build a payment from `policyId|amount|date`."""
        fields = split_record(line)
        if len(fields) != PAYMENT_FIELD_COUNT:
            if strict:
                raise RecordFormatError(f"Malformed payment record: {line!r}")
            return cls()
        return cls(policy_id=fields[0], amount=parse_lenient_decimal(fields[1]), date=fields[2])

    def to_record(self) -> str:
        return join_record([self.policy_id, render_decimal(self.amount), self.date])
