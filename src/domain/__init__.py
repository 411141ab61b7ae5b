"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for customer registration
and card payments. It defines its own port interfaces for infrastructure
abstraction, ensuring true hexagonal architecture decoupling.
"""

from .exceptions import (
    ChargeDeclined,
    CustomerNotFound,
    DomainError,
    InvalidPhoneNumber,
    PaymentError,
    PhoneNumberTaken,
    RegistrationError,
    UnsupportedCurrency,
)
from .models import (
    ChargeOutcome,
    Currency,
    Customer,
    CustomerRegistrationRequest,
    Payment,
    PaymentRequest,
)
from .payment import ACCEPTED_CURRENCIES, PaymentService
from .ports import CardPaymentCharger, CustomerRepository, PaymentRepository, PhoneNumberValidator
from .registration import RegistrationService

__all__ = [
    "ACCEPTED_CURRENCIES",
    "CardPaymentCharger",
    "ChargeDeclined",
    "ChargeOutcome",
    "Currency",
    "Customer",
    "CustomerNotFound",
    "CustomerRegistrationRequest",
    "CustomerRepository",
    "DomainError",
    "InvalidPhoneNumber",
    "Payment",
    "PaymentError",
    "PaymentRepository",
    "PaymentRequest",
    "PaymentService",
    "PhoneNumberTaken",
    "PhoneNumberValidator",
    "RegistrationError",
    "RegistrationService",
    "UnsupportedCurrency",
]
