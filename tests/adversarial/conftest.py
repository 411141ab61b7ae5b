"""
Shared fixtures for adversarial tests.

Provides common test infrastructure for concurrent registration and
payment tests against the in-memory adapters.
"""

from uuid import uuid4

import pytest

from src.adapters.repository.memory import InMemoryCustomerRepository
from src.domain.models import Customer

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial

VALID_PHONE_NUMBER = "+447000000000"


@pytest.fixture
def existing_customer(customer_repository: InMemoryCustomerRepository) -> Customer:
    """A customer already registered under VALID_PHONE_NUMBER."""
    customer = Customer(uuid4(), "Maryam", VALID_PHONE_NUMBER)
    customer_repository.save(customer)
    return customer
