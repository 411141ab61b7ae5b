"""
Domain models - Customers, payments and the requests that carry them.

Plain dataclasses and enums only. Entities are frozen: services derive
new instances with dataclasses.replace() instead of mutating caller-owned
values.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from uuid import UUID


class Currency(str, Enum):
    """
    Currencies known to the payment domain.

    Which of them may actually be charged is a PaymentService policy,
    not a property of the enum.
    """

    USD = "USD"
    GBP = "GBP"
    EUR = "EUR"


@dataclass(frozen=True)
class Customer:
    """A registered customer. Phone numbers are unique across customers."""

    id: UUID | None
    name: str
    phone_number: str


@dataclass(frozen=True)
class CustomerRegistrationRequest:
    customer: Customer


@dataclass(frozen=True)
class Payment:
    """
    A card payment that has been (or is about to be) charged.

    id is assigned by the payment repository at persistence time.
    customer_id is bound by PaymentService from the verified customer,
    never taken from the incoming request.
    """

    id: int | None
    customer_id: UUID | None
    amount: Decimal
    currency: Currency
    source: str
    description: str


@dataclass(frozen=True)
class PaymentRequest:
    payment: Payment


@dataclass(frozen=True)
class ChargeOutcome:
    """Result of a single charge attempt. There is no pending state."""

    success: bool
