"""Policy repository backed by a flat record file."""

from __future__ import annotations

import logging
from dataclasses import replace
from decimal import Decimal

from polibill_app.core.calendar import Clock, SystemClock, format_date, parse_date
from polibill_app.core.validation import parse_non_negative_decimal, parse_non_negative_int
from polibill_app.models.policy import POLICY_ID_PREFIX, Policy, policy_number
from polibill_app.repositories.flat_file import FlatFileStore

logger = logging.getLogger(__name__)

FIRST_POLICY_NUMBER = 1001


class PolicyRepository:
    """Handles policy persistence and retrieval."""

    def __init__(self, store: FlatFileStore, clock: Clock | None = None, strict: bool = False):
        self._store = store
        self._clock = clock or SystemClock()
        self._strict = strict
        self._policies: list[Policy] = []
        self.load()

    def load(self) -> None:
        """Reload the collection from the backing file."""
        today = self._clock.today()
        self._policies = [
            Policy.from_record(line, today, strict=self._strict) for line in self._store.read_lines()
        ]
        logger.debug("Loaded %d policies from %s", len(self._policies), self._store.path)

    def _persist(self) -> None:
        self._store.write_lines([policy.to_record() for policy in self._policies])

    def next_policy_id(self) -> str:
        """Return `P<max + 1>`, never below P1001."""
        numbers = [policy_number(policy.policy_id) for policy in self._policies]
        highest = max((number for number in numbers if number is not None), default=0)
        return f"{POLICY_ID_PREFIX}{max(highest, FIRST_POLICY_NUMBER - 1) + 1}"

    def add_policy(
        self,
        client_id: int,
        policy_type: str,
        premium: Decimal,
        duration: int,
        start_date: str,
    ) -> Policy:
        """Insert a policy with the next id; an invalid start date becomes today."""
        if parse_date(start_date) is None:
            logger.info("Start date %r is not a valid date, using today", start_date)
            start_date = format_date(self._clock.today())
        policy = Policy(
            policy_id=self.next_policy_id(),
            type=policy_type,
            premium=premium,
            duration=duration,
            client_id=client_id,
            start_date=start_date,
        )
        self._policies.append(policy)
        self._persist()
        return replace(policy)

    def find_by_policy_id(self, policy_id: str) -> Policy | None:
        for policy in self._policies:
            if policy.policy_id == policy_id:
                return replace(policy)
        return None

    def find_by_client_id(self, client_id: int) -> list[Policy]:
        return [replace(policy) for policy in self._policies if policy.client_id == client_id]

    def has_policies(self, client_id: int) -> bool:
        return any(policy.client_id == client_id for policy in self._policies)

    def list_all(self) -> list[Policy]:
        return [replace(policy) for policy in self._policies]

    def save(self, policy: Policy) -> bool:
        """Write a modified copy back over the first entry with the same id."""
        for index, existing in enumerate(self._policies):
            if existing.policy_id == policy.policy_id:
                self._policies[index] = replace(policy)
                self._persist()
                return True
        return False

    def update_policy(
        self,
        policy_id: str,
        policy_type: str = "",
        premium: str = "",
        duration: str = "",
        start_date: str = "",
    ) -> bool:
        """Apply a partial update; empty or unparseable values keep the stored field."""
        policy = self.find_by_policy_id(policy_id)
        if policy is None:
            return False
        if policy_type:
            policy.type = policy_type
        if premium:
            parsed_premium = parse_non_negative_decimal(premium)
            if parsed_premium is not None:
                policy.premium = parsed_premium
            else:
                logger.info("Ignoring invalid premium %r for policy %s", premium, policy_id)
        if duration:
            parsed_duration = parse_non_negative_int(duration)
            if parsed_duration is not None:
                policy.duration = parsed_duration
            else:
                logger.info("Ignoring invalid duration %r for policy %s", duration, policy_id)
        if start_date:
            if parse_date(start_date) is not None:
                policy.start_date = start_date
            else:
                logger.info("Ignoring invalid start date %r for policy %s", start_date, policy_id)
        return self.save(policy)

    def remove_policy(self, policy_id: str, has_payments: bool) -> bool:
        """Remove every entry with the id unless the caller reports payments."""
        if has_payments:
            return False
        remaining = [policy for policy in self._policies if policy.policy_id != policy_id]
        if len(remaining) == len(self._policies):
            return False
        self._policies = remaining
        self._persist()
        return True
