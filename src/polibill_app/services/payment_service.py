"""Payment use cases exposed to the menu layer."""

from __future__ import annotations

import logging
from decimal import Decimal

from polibill_app.core.validation import is_usable_amount
from polibill_app.models.payment import Payment
from polibill_app.repositories.payment_repository import PaymentRepository
from polibill_app.repositories.policy_repository import PolicyRepository

logger = logging.getLogger(__name__)


class PaymentService:
    """Coordinates payment use cases."""

    def __init__(self, payment_repo: PaymentRepository, policy_repo: PolicyRepository):
        self._payment_repo = payment_repo
        self._policy_repo = policy_repo

    def record_payment(self, policy_id: str, amount: Decimal, payment_date: str) -> Payment | None:
        """Record a payment against an existing policy.

        Returns None when the policy is unknown or the amount is out of range.
        """
        if self._policy_repo.find_by_policy_id(policy_id) is None:
            logger.info("Cannot record payment: policy %s not found", policy_id)
            return None
        if not is_usable_amount(amount):
            logger.info("Cannot record payment: amount %s is out of range", amount)
            return None
        payment = self._payment_repo.record_payment(policy_id, amount, payment_date.strip())
        logger.info("Payment of %s recorded for policy %s", payment.amount, policy_id)
        return payment

    def payment_history(self, policy_id: str) -> list[Payment] | None:
        """Return the policy's payments in date order, or None for an unknown policy."""
        if self._policy_repo.find_by_policy_id(policy_id) is None:
            return None
        return self._payment_repo.find_by_policy_id(policy_id)
