"""Application dependency container."""

from __future__ import annotations

from dataclasses import dataclass

from polibill_app.core.calendar import Clock, SystemClock
from polibill_app.core.config import AppConfig, load_config
from polibill_app.core.logging_setup import setup_logging
from polibill_app.repositories.client_repository import ClientRepository
from polibill_app.repositories.flat_file import FlatFileStore
from polibill_app.repositories.payment_repository import PaymentRepository
from polibill_app.repositories.policy_repository import PolicyRepository
from polibill_app.services.billing_engine import BillingEngine
from polibill_app.services.client_service import ClientService
from polibill_app.services.payment_service import PaymentService
from polibill_app.services.policy_service import PolicyService
from polibill_app.services.reports import ReportGenerator


@dataclass
class ServiceContainer:
    """Wires repositories, the billing engine and services."""

    config: AppConfig
    client_service: ClientService
    policy_service: PolicyService
    payment_service: PaymentService
    billing_engine: BillingEngine
    reports: ReportGenerator


def build_container(
    config: AppConfig | None = None,
    clock: Clock | None = None,
    configure_logging: bool = True,
) -> ServiceContainer:
    """Build dependencies and load every record file."""
    config = config or load_config()
    clock = clock or SystemClock()
    if configure_logging:
        setup_logging(config.logging.level)

    strict = config.storage.strict_records
    client_repo = ClientRepository(FlatFileStore(config.storage.clients_path), strict=strict)
    policy_repo = PolicyRepository(FlatFileStore(config.storage.policies_path), clock, strict=strict)
    payment_repo = PaymentRepository(FlatFileStore(config.storage.payments_path), clock, strict=strict)

    engine = BillingEngine(policy_repo, payment_repo, client_repo)

    return ServiceContainer(
        config=config,
        client_service=ClientService(client_repo, policy_repo),
        policy_service=PolicyService(policy_repo, client_repo, payment_repo),
        payment_service=PaymentService(payment_repo, policy_repo),
        billing_engine=engine,
        reports=ReportGenerator(client_repo, policy_repo, engine, clock),
    )
