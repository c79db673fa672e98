"""Client repository backed by a flat record file."""

from __future__ import annotations

import logging
from dataclasses import replace

from polibill_app.core.validation import parse_non_negative_int
from polibill_app.models.client import Client
from polibill_app.repositories.flat_file import FlatFileStore

logger = logging.getLogger(__name__)

FIRST_CLIENT_ID = 1001


class ClientRepository:
    """Handles client persistence and retrieval.

    Lookups return copies; write changes back with `save`.
    """

    def __init__(self, store: FlatFileStore, strict: bool = False):
        self._store = store
        self._strict = strict
        self._clients: list[Client] = []
        self.load()

    def load(self) -> None:
        """Reload the collection from the backing file."""
        self._clients = [Client.from_record(line, strict=self._strict) for line in self._store.read_lines()]
        logger.debug("Loaded %d clients from %s", len(self._clients), self._store.path)

    def _persist(self) -> None:
        self._store.write_lines([client.to_record() for client in self._clients])

    def next_client_id(self) -> int:
        """Return max existing id + 1, never below 1001."""
        highest = max((client.id for client in self._clients), default=FIRST_CLIENT_ID - 1)
        return max(highest, FIRST_CLIENT_ID - 1) + 1

    def add_client(self, name: str, age: int, contact: str, address: str) -> Client:
        """Insert a client with the next id and return it."""
        client = Client(id=self.next_client_id(), name=name, age=age, contact=contact, address=address)
        self._clients.append(client)
        self._persist()
        return replace(client)

    def find_by_id(self, client_id: int) -> Client | None:
        for client in self._clients:
            if client.id == client_id:
                return replace(client)
        return None

    def exists(self, client_id: int) -> bool:
        return any(client.id == client_id for client in self._clients)

    def find_by_name(self, keyword: str) -> list[Client]:
        """Case-insensitive substring search on name, in collection order."""
        needle = keyword.lower()
        return [replace(client) for client in self._clients if needle in client.name.lower()]

    def list_all(self) -> list[Client]:
        return [replace(client) for client in self._clients]

    def save(self, client: Client) -> bool:
        """Write a modified copy back over the first entry with the same id."""
        for index, existing in enumerate(self._clients):
            if existing.id == client.id:
                self._clients[index] = replace(client)
                self._persist()
                return True
        return False

    def update_client(
        self,
        client_id: int,
        name: str = "",
        age: str = "",
        contact: str = "",
        address: str = "",
    ) -> bool:
        """Apply a partial update; empty values keep the stored field.

        Age is only replaced by all-digit text. Returns False when the client
        does not exist.
        """
        client = self.find_by_id(client_id)
        if client is None:
            return False
        if name:
            client.name = name
        parsed_age = parse_non_negative_int(age) if age else None
        if parsed_age is not None:
            client.age = parsed_age
        elif age:
            logger.info("Ignoring non-numeric age %r for client %s", age, client_id)
        if contact:
            client.contact = contact
        if address:
            client.address = address
        return self.save(client)

    def remove_client(self, client_id: int, has_policies: bool) -> bool:
        """Remove every entry with the id unless the caller reports policies."""
        if has_policies:
            return False
        remaining = [client for client in self._clients if client.id != client_id]
        if len(remaining) == len(self._clients):
            return False
        self._clients = remaining
        self._persist()
        return True
