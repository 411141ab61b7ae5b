"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from decimal import Decimal
from typing import Protocol
from uuid import UUID

from .models import ChargeOutcome, Currency, Customer, Payment


class CustomerRepository(Protocol):
    """Port interface for customer persistence."""

    def find_by_phone_number(self, phone_number: str) -> Customer | None:
        """
        Look up the customer owning a phone number.

        Args:
            phone_number: Phone number exactly as submitted

        Returns:
            The owning Customer, or None if the number is free
        """
        ...

    def find_by_id(self, customer_id: UUID) -> Customer | None:
        """Look up a customer by identifier. Returns None when absent."""
        ...

    def save(self, customer: Customer) -> None:
        """
        Persist a customer.

        The customer always carries an identifier when handed over by
        the domain; identity assignment is not the repository's job.
        """
        ...


class PaymentRepository(Protocol):
    """Port interface for payment persistence."""

    def save(self, payment: Payment) -> None:
        """Persist a charged payment, assigning its identifier."""
        ...


class CardPaymentCharger(Protocol):
    """Port interface for the external card charging gateway."""

    def charge_card(
        self, source: str, amount: Decimal, currency: Currency, description: str
    ) -> ChargeOutcome:
        """
        Attempt to debit a payment source.

        A single synchronous, all-or-nothing call.

        Args:
            source: Tokenized card reference
            amount: Exact amount to debit
            currency: Currency of the amount
            description: Free text shown on the statement

        Returns:
            ChargeOutcome with success=True only if the card was debited
        """
        ...


class PhoneNumberValidator(Protocol):
    """Port interface for phone number validation."""

    def is_valid(self, phone_number: str) -> bool:
        """Return True if the phone number may be registered."""
        ...
