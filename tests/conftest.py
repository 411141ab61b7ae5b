"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Resetting cached singletons between tests
- Services wired with in-memory adapters
"""

from collections.abc import Generator

import pytest

from src import dependencies
from src.adapters.charger.console import ConsoleCardCharger
from src.adapters.repository.memory import InMemoryCustomerRepository, InMemoryPaymentRepository
from src.adapters.validation.phone import PrefixPhoneNumberValidator
from src.domain.payment import PaymentService
from src.domain.registration import RegistrationService


@pytest.fixture(autouse=True)
def reset_dependencies() -> Generator[None, None, None]:
    """Drop cached settings and adapters so every test starts clean."""
    dependencies.reset()
    yield
    dependencies.reset()


@pytest.fixture
def customer_repository() -> InMemoryCustomerRepository:
    return InMemoryCustomerRepository()


@pytest.fixture
def payment_repository() -> InMemoryPaymentRepository:
    return InMemoryPaymentRepository()


@pytest.fixture
def registration_service(customer_repository: InMemoryCustomerRepository) -> RegistrationService:
    return RegistrationService(
        customer_repository=customer_repository,
        phone_number_validator=PrefixPhoneNumberValidator(),
    )


@pytest.fixture
def payment_service(
    customer_repository: InMemoryCustomerRepository,
    payment_repository: InMemoryPaymentRepository,
) -> PaymentService:
    return PaymentService(
        customer_repository=customer_repository,
        payment_repository=payment_repository,
        card_charger=ConsoleCardCharger(),
    )
