"""Report rows for the client, policy and billing listings.

Rows are plain data; rendering them is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from polibill_app.core.calendar import Clock, Date, SystemClock, add_months
from polibill_app.models.client import Client
from polibill_app.models.policy import Policy
from polibill_app.repositories.client_repository import ClientRepository
from polibill_app.repositories.policy_repository import PolicyRepository
from polibill_app.services.billing_engine import BillingEngine


class ReportKind(str, Enum):
    ALL_CLIENTS = "all_clients"
    ALL_POLICIES = "all_policies"
    EXPIRING_POLICIES = "expiring_policies"
    UNPAID_CLIENTS = "unpaid_clients"


@dataclass(frozen=True)
class ExpiringPolicyRow:
    policy_id: str
    client_id: int
    client_name: str
    end_date: Date


@dataclass(frozen=True)
class UnpaidPolicyRow:
    client_id: int
    client_name: str
    policy_id: str
    remaining_balance: Decimal


@dataclass(frozen=True)
class ExpiringPoliciesReport:
    """Policies ending between today and the window end, inclusive."""

    window_end: Date
    rows: list[ExpiringPolicyRow]


class ReportGenerator:
    """Builds report rows from the repositories and the billing engine."""

    def __init__(
        self,
        client_repo: ClientRepository,
        policy_repo: PolicyRepository,
        engine: BillingEngine,
        clock: Clock | None = None,
    ):
        self._client_repo = client_repo
        self._policy_repo = policy_repo
        self._engine = engine
        self._clock = clock or SystemClock()

    def all_clients(self) -> list[Client]:
        return self._client_repo.list_all()

    def all_policies(self) -> list[Policy]:
        return self._policy_repo.list_all()

    def expiring_policies(self, months: int) -> ExpiringPoliciesReport:
        """List policies whose end date falls within the next `months` months.

        Policies with an unparseable start date are skipped.
        """
        today = self._clock.today()
        window_end = add_months(today, months)
        rows: list[ExpiringPolicyRow] = []
        for policy in self._policy_repo.list_all():
            end_date = self._engine.policy_end_date(policy)
            if end_date is None:
                continue
            if today <= end_date <= window_end:
                rows.append(
                    ExpiringPolicyRow(
                        policy_id=policy.policy_id,
                        client_id=policy.client_id,
                        client_name=self._engine.client_name(policy.client_id),
                        end_date=end_date,
                    )
                )
        return ExpiringPoliciesReport(window_end=window_end, rows=rows)

    def unpaid_clients(self) -> list[UnpaidPolicyRow]:
        """List every policy that still carries a positive balance."""
        rows: list[UnpaidPolicyRow] = []
        for policy in self._policy_repo.list_all():
            remaining = self._engine.remaining_balance(policy)
            if remaining > 0:
                rows.append(
                    UnpaidPolicyRow(
                        client_id=policy.client_id,
                        client_name=self._engine.client_name(policy.client_id),
                        policy_id=policy.policy_id,
                        remaining_balance=remaining,
                    )
                )
        return rows

    def generate(
        self, kind: ReportKind, months: int = 0
    ) -> list[Client] | list[Policy] | ExpiringPoliciesReport | list[UnpaidPolicyRow]:
        """Dispatch to the report for `kind`."""
        kind = ReportKind(kind)
        if kind is ReportKind.ALL_CLIENTS:
            return self.all_clients()
        if kind is ReportKind.ALL_POLICIES:
            return self.all_policies()
        if kind is ReportKind.EXPIRING_POLICIES:
            return self.expiring_policies(months)
        if kind is ReportKind.UNPAID_CLIENTS:
            return self.unpaid_clients()
        raise ValueError(f"Unsupported report kind: {kind}")
