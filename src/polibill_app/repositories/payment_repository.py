"""Payment repository backed by a flat record file."""

from __future__ import annotations

import logging
from decimal import Decimal

from polibill_app.core.calendar import Clock, Date, SystemClock, format_date, parse_date
from polibill_app.models.payment import Payment
from polibill_app.repositories.flat_file import FlatFileStore

logger = logging.getLogger(__name__)

_UNPARSED = Date(0, 0, 0)


def history_sort_key(payment: Payment) -> tuple[int, Date, str]:
    """Order by parsed date; unparseable dates go last, by raw text."""
    parsed = parse_date(payment.date)
    if parsed is None:
        return (1, _UNPARSED, payment.date)
    return (0, parsed, "")


class PaymentRepository:
    """Handles payment persistence. Payments are immutable once recorded."""

    def __init__(self, store: FlatFileStore, clock: Clock | None = None, strict: bool = False):
        self._store = store
        self._clock = clock or SystemClock()
        self._strict = strict
        self._payments: list[Payment] = []
        self.load()

    def load(self) -> None:
        """Reload the collection from the backing file."""
        self._payments = [Payment.from_record(line, strict=self._strict) for line in self._store.read_lines()]
        logger.debug("Loaded %d payments from %s", len(self._payments), self._store.path)

    def _persist(self) -> None:
        self._store.write_lines([payment.to_record() for payment in self._payments])

    def record_payment(self, policy_id: str, amount: Decimal, payment_date: str) -> Payment:
        """Append a payment; an invalid date becomes today."""
        if parse_date(payment_date) is None:
            logger.info("Payment date %r is not a valid date, using today", payment_date)
            payment_date = format_date(self._clock.today())
        payment = Payment(policy_id=policy_id, amount=amount, date=payment_date)
        self._payments.append(payment)
        self._persist()
        return payment

    def find_by_policy_id(self, policy_id: str) -> list[Payment]:
        """Return a policy's payments in history order (stable for equal dates)."""
        matches = [payment for payment in self._payments if payment.policy_id == policy_id]
        return sorted(matches, key=history_sort_key)

    def total_paid(self, policy_id: str) -> Decimal:
        return sum(
            (payment.amount for payment in self._payments if payment.policy_id == policy_id),
            Decimal("0"),
        )

    def has_payments(self, policy_id: str) -> bool:
        return any(payment.policy_id == policy_id for payment in self._payments)

    def delete_payments_of(self, policy_id: str) -> int:
        """Remove all payments of one policy and return how many were removed."""
        remaining = [payment for payment in self._payments if payment.policy_id != policy_id]
        removed = len(self._payments) - len(remaining)
        if removed:
            self._payments = remaining
            self._persist()
        return removed

    def list_all(self) -> list[Payment]:
        return list(self._payments)
