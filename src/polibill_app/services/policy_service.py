"""Policy use cases exposed to the menu layer."""

from __future__ import annotations

import logging
from decimal import Decimal

from polibill_app.core.validation import is_usable_amount
from polibill_app.models.policy import Policy
from polibill_app.repositories.client_repository import ClientRepository
from polibill_app.repositories.payment_repository import PaymentRepository
from polibill_app.repositories.policy_repository import PolicyRepository

logger = logging.getLogger(__name__)


class PolicyService:
    """Coordinates policy use cases."""

    def __init__(
        self,
        policy_repo: PolicyRepository,
        client_repo: ClientRepository,
        payment_repo: PaymentRepository,
    ):
        self._policy_repo = policy_repo
        self._client_repo = client_repo
        self._payment_repo = payment_repo

    def next_policy_id(self) -> str:
        return self._policy_repo.next_policy_id()

    def add_policy(
        self,
        client_id: int,
        policy_type: str,
        premium: Decimal,
        duration: int,
        start_date: str,
    ) -> Policy | None:
        """Create a policy for an existing client.

        Returns None when the client is unknown or the premium is out of range.
        """
        if not self._client_repo.exists(client_id):
            logger.info("Cannot create policy: client %s not found", client_id)
            return None
        if not is_usable_amount(premium):
            logger.info("Cannot create policy: premium %s is out of range", premium)
            return None
        policy = self._policy_repo.add_policy(
            client_id,
            policy_type.strip(),
            premium,
            duration,
            start_date.strip(),
        )
        logger.info("Policy %s created for client %s", policy.policy_id, client_id)
        return policy

    def get_policy(self, policy_id: str) -> Policy | None:
        return self._policy_repo.find_by_policy_id(policy_id)

    def policies_of_client(self, client_id: int) -> list[Policy]:
        return self._policy_repo.find_by_client_id(client_id)

    def list_policies(self) -> list[Policy]:
        return self._policy_repo.list_all()

    def update_policy(
        self,
        policy_id: str,
        policy_type: str = "",
        premium: str = "",
        duration: str = "",
        start_date: str = "",
    ) -> bool:
        """Partially update a policy; empty or invalid values keep existing fields."""
        updated = self._policy_repo.update_policy(
            policy_id,
            policy_type,
            premium.strip(),
            duration.strip(),
            start_date.strip(),
        )
        if not updated:
            logger.info("Policy %s not found for update", policy_id)
        return updated

    def delete_policy(self, policy_id: str) -> bool:
        """Delete a policy that has no recorded payments."""
        has_payments = self._payment_repo.has_payments(policy_id)
        if has_payments:
            logger.info("Refusing to delete policy %s: payments exist", policy_id)
        deleted = self._policy_repo.remove_policy(policy_id, has_payments)
        if deleted:
            logger.info("Policy %s deleted", policy_id)
        return deleted
