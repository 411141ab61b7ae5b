"""
Console card charger adapter - Implements CardPaymentCharger protocol.

This module provides a stand-in for the card payment provider, logging
every charge attempt instead of calling out to a gateway.
"""

import logging
from decimal import Decimal

from src.domain.models import ChargeOutcome, Currency

logger = logging.getLogger(__name__)


class ConsoleCardCharger:
    """
    Implements CardPaymentCharger protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    For demo/development purposes - every attempt gets the same answer.
    """

    def __init__(self, approve: bool = True) -> None:
        """
        Args:
            approve: Outcome reported for every charge attempt
        """
        self._approve = approve

    def charge_card(
        self, source: str, amount: Decimal, currency: Currency, description: str
    ) -> ChargeOutcome:
        """
        Log the charge attempt and report the configured outcome.

        Args:
            source: Tokenized card reference
            amount: Amount to debit
            currency: Currency of the amount
            description: Statement description

        Returns:
            ChargeOutcome(success=approve)
        """
        logger.info(
            "[CHARGE] Source: %s Amount: %s %s Description: %s Approved: %s",
            source,
            amount,
            currency.value,
            description,
            self._approve,
        )
        return ChargeOutcome(success=self._approve)
