"""Client use cases exposed to the menu layer."""

from __future__ import annotations

import logging

from polibill_app.models.client import Client
from polibill_app.repositories.client_repository import ClientRepository
from polibill_app.repositories.policy_repository import PolicyRepository

logger = logging.getLogger(__name__)


class ClientService:
    """Coordinates client use cases."""

    def __init__(self, client_repo: ClientRepository, policy_repo: PolicyRepository):
        self._client_repo = client_repo
        self._policy_repo = policy_repo

    def next_client_id(self) -> int:
        return self._client_repo.next_client_id()

    def add_client(self, name: str, age: int, contact: str, address: str) -> Client:
        """Create a client and return it with its assigned id."""
        client = self._client_repo.add_client(name.strip(), age, contact.strip(), address.strip())
        logger.info("Client %s created", client.id)
        return client

    def get_client(self, client_id: int) -> Client | None:
        return self._client_repo.find_by_id(client_id)

    def search_clients(self, keyword: str) -> list[Client]:
        return self._client_repo.find_by_name(keyword)

    def list_clients(self) -> list[Client]:
        return self._client_repo.list_all()

    def update_client(
        self,
        client_id: int,
        name: str = "",
        age: str = "",
        contact: str = "",
        address: str = "",
    ) -> bool:
        """Partially update a client; empty values keep existing fields."""
        updated = self._client_repo.update_client(
            client_id, name.strip(), age.strip(), contact.strip(), address.strip()
        )
        if not updated:
            logger.info("Client %s not found for update", client_id)
        return updated

    def delete_client(self, client_id: int) -> bool:
        """Delete a client that owns no policies."""
        has_policies = self._policy_repo.has_policies(client_id)
        if has_policies:
            logger.info("Refusing to delete client %s: policies exist", client_id)
        deleted = self._client_repo.remove_client(client_id, has_policies)
        if deleted:
            logger.info("Client %s deleted", client_id)
        return deleted
