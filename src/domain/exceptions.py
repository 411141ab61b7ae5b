"""
Domain exceptions - Semantic error types for registration and payments.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
Each exception keeps the offending value so callers can translate
it into their own responses.
"""

from uuid import UUID

from .models import Currency


class DomainError(Exception):
    """Base class for all domain errors."""

    pass


class RegistrationError(DomainError):
    """Base class for registration domain errors."""

    pass


class InvalidPhoneNumber(RegistrationError):
    """Phone number rejected by the phone number validator."""

    def __init__(self, phone_number: str) -> None:
        self.phone_number = phone_number
        super().__init__(f"Phone Number {phone_number} is not valid")


class PhoneNumberTaken(RegistrationError):
    """Phone number already belongs to a different customer."""

    def __init__(self, phone_number: str) -> None:
        self.phone_number = phone_number
        super().__init__(f"phone number [{phone_number}] is taken")


class PaymentError(DomainError):
    """Base class for payment domain errors."""

    pass


class CustomerNotFound(PaymentError):
    def __init__(self, customer_id: UUID) -> None:
        self.customer_id = customer_id
        super().__init__(f"Customer with id [{customer_id}] not found")


class UnsupportedCurrency(PaymentError):
    """Currency is not on the accepted list."""

    def __init__(self, currency: Currency | str) -> None:
        self.currency = currency
        code = currency.value if isinstance(currency, Currency) else currency
        super().__init__(f"Currency [{code}] not supported")


class ChargeDeclined(PaymentError):
    """The card charger reported that the card was not debited."""

    def __init__(self, customer_id: UUID) -> None:
        self.customer_id = customer_id
        super().__init__(f"Card is not debited for customer {customer_id}")
