"""
Dependency wiring - Factories for domain services and their adapters.

This module builds the collaborator graph from settings so that
embedding applications only ask for a service.
"""

import logging
from functools import lru_cache

from src.adapters.charger.console import ConsoleCardCharger
from src.adapters.repository.memory import InMemoryCustomerRepository, InMemoryPaymentRepository
from src.adapters.validation.phone import PrefixPhoneNumberValidator
from src.config.settings import get_settings
from src.domain.payment import PaymentService
from src.domain.registration import RegistrationService

logger = logging.getLogger(__name__)


# Stores are process-wide singletons so both services share customers
@lru_cache
def get_customer_repository() -> InMemoryCustomerRepository:
    return InMemoryCustomerRepository()


@lru_cache
def get_payment_repository() -> InMemoryPaymentRepository:
    return InMemoryPaymentRepository()


@lru_cache
def get_phone_number_validator() -> PrefixPhoneNumberValidator:
    """Create phone number validator from settings (singleton)."""
    settings = get_settings()
    return PrefixPhoneNumberValidator(
        prefix=settings.phone_number_prefix,
        length=settings.phone_number_length,
    )


@lru_cache
def get_card_charger() -> ConsoleCardCharger:
    """Get console card charger (singleton)."""
    settings = get_settings()
    if not settings.card_charger_approves:
        logger.warning("Console card charger is configured to decline every charge")
    return ConsoleCardCharger(approve=settings.card_charger_approves)


def get_registration_service() -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the customer repository and phone number validator.
    """
    return RegistrationService(
        customer_repository=get_customer_repository(),
        phone_number_validator=get_phone_number_validator(),
    )


def get_payment_service() -> PaymentService:
    """
    Create payment service with injected dependencies.

    Wires together both repositories and the card charger.
    """
    return PaymentService(
        customer_repository=get_customer_repository(),
        payment_repository=get_payment_repository(),
        card_charger=get_card_charger(),
    )


def reset() -> None:
    """Drop all cached singletons, including settings."""
    for factory in (
        get_customer_repository,
        get_payment_repository,
        get_phone_number_validator,
        get_card_charger,
        get_settings,
    ):
        factory.cache_clear()
