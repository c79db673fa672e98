"""Balance and due-date calculations for policies."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal

from polibill_app.core.calendar import Date, add_months
from polibill_app.models.policy import Policy
from polibill_app.repositories.client_repository import ClientRepository
from polibill_app.repositories.payment_repository import PaymentRepository
from polibill_app.repositories.policy_repository import PolicyRepository

UNKNOWN_CLIENT_NAME = "[Unknown]"


def months_paid(premium: Decimal, total_paid: Decimal) -> int:
    """Approximate whole months covered: floor(total / premium), 0 without a premium.

    Payment dates are ignored; only the gross amount counts.
    """
    if premium <= 0:
        return 0
    return math.floor(total_paid / premium)


def next_due_date(policy: Policy, total_paid: Decimal) -> Date | None:
    """Return start + (months paid + 1) months, or None when nothing is due."""
    start = policy.parsed_start_date()
    if start is None:
        return None
    paid_months = months_paid(policy.premium, total_paid)
    if paid_months >= policy.duration:
        return None
    return add_months(start, paid_months + 1)


def remaining_balance(policy: Policy, total_paid: Decimal) -> Decimal:
    """Return premium x duration - paid, clamped at zero."""
    return max(Decimal("0"), policy.total_due - total_paid)


def policy_end_date(policy: Policy) -> Date | None:
    start = policy.parsed_start_date()
    if start is None:
        return None
    return add_months(start, policy.duration)


@dataclass(frozen=True)
class PolicyStatus:
    """Billing snapshot of one policy."""

    policy: Policy
    client_name: str
    total_due: Decimal
    total_paid: Decimal
    months_paid: int
    next_due_date: Date | None
    remaining_balance: Decimal
    end_date: Date | None


class BillingEngine:
    """Derives billing figures from the policy and payment repositories.

    The engine only reads; it never mutates a repository.
    """

    def __init__(
        self,
        policy_repo: PolicyRepository,
        payment_repo: PaymentRepository,
        client_repo: ClientRepository,
    ):
        self._policy_repo = policy_repo
        self._payment_repo = payment_repo
        self._client_repo = client_repo

    def total_paid(self, policy_id: str) -> Decimal:
        return self._payment_repo.total_paid(policy_id)

    @staticmethod
    def months_paid(premium: Decimal, total_paid: Decimal) -> int:
        return months_paid(premium, total_paid)

    def next_due_date(self, policy: Policy) -> Date | None:
        return next_due_date(policy, self.total_paid(policy.policy_id))

    def remaining_balance(self, policy: Policy) -> Decimal:
        return remaining_balance(policy, self.total_paid(policy.policy_id))

    @staticmethod
    def policy_end_date(policy: Policy) -> Date | None:
        return policy_end_date(policy)

    def client_name(self, client_id: int) -> str:
        client = self._client_repo.find_by_id(client_id)
        return client.name if client else UNKNOWN_CLIENT_NAME

    def policy_status(self, policy_id: str) -> PolicyStatus | None:
        """Bundle every billing figure for one policy, or None when it does not exist."""
        policy = self._policy_repo.find_by_policy_id(policy_id)
        if policy is None:
            return None
        paid = self.total_paid(policy_id)
        return PolicyStatus(
            policy=policy,
            client_name=self.client_name(policy.client_id),
            total_due=policy.total_due,
            total_paid=paid,
            months_paid=months_paid(policy.premium, paid),
            next_due_date=next_due_date(policy, paid),
            remaining_balance=remaining_balance(policy, paid),
            end_date=policy_end_date(policy),
        )
