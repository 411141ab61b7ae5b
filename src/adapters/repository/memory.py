"""
In-memory repository adapters - Implement CustomerRepository and PaymentRepository.

Process-local stores used for wiring the services without a database.

Uniqueness Design:
------------------
RegistrationService checks phone number ownership before saving, but two
concurrent registrations can both observe a free number. The customer
store therefore re-checks ownership inside its lock at save time, the
same job a UNIQUE constraint does in a relational store.
"""

import itertools
import logging
import threading
from dataclasses import replace
from uuid import UUID

from src.domain.exceptions import PhoneNumberTaken
from src.domain.models import Customer, Payment

logger = logging.getLogger(__name__)


class InMemoryCustomerRepository:
    """
    Implements CustomerRepository protocol with a lock-guarded dict.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._customers: dict[UUID, Customer] = {}

    def find_by_phone_number(self, phone_number: str) -> Customer | None:
        with self._lock:
            return self._owner_of(phone_number)

    def find_by_id(self, customer_id: UUID) -> Customer | None:
        with self._lock:
            return self._customers.get(customer_id)

    def save(self, customer: Customer) -> None:
        """
        Store a customer, replacing any previous record with the same id.

        Raises:
            ValueError: If the customer has no id
            PhoneNumberTaken: If another customer owns the phone number
        """
        if customer.id is None:
            raise ValueError("Customer must have an id before it is saved")

        with self._lock:
            owner = self._owner_of(customer.phone_number)
            if owner is not None and owner.id != customer.id:
                raise PhoneNumberTaken(customer.phone_number)
            self._customers[customer.id] = customer

        logger.info("Saved customer %s", customer.id)

    def all(self) -> list[Customer]:
        with self._lock:
            return list(self._customers.values())

    def _owner_of(self, phone_number: str) -> Customer | None:
        # Caller holds the lock
        for customer in self._customers.values():
            if customer.phone_number == phone_number:
                return customer
        return None


class InMemoryPaymentRepository:
    """
    Implements PaymentRepository protocol with a lock-guarded dict.

    Identifiers are assigned at save time from a counter starting at 1.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._payments: dict[int, Payment] = {}

    def save(self, payment: Payment) -> None:
        with self._lock:
            stored = replace(payment, id=next(self._ids))
            self._payments[stored.id] = stored

        logger.info(
            "Saved payment %s for customer %s: %s %s",
            stored.id,
            stored.customer_id,
            stored.amount,
            stored.currency.value,
        )

    def find_by_id(self, payment_id: int) -> Payment | None:
        with self._lock:
            return self._payments.get(payment_id)

    def all(self) -> list[Payment]:
        with self._lock:
            return list(self._payments.values())
