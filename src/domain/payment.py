"""
Payment domain service - Card charging for registered customers.

Gates run in a fixed order and each one short-circuits everything after it:

    customer exists -> currency accepted -> card charged -> payment saved

Note: Atomicity between the charge and the save is by ordering only.
A save that fails after a successful charge is not compensated.
"""

from dataclasses import dataclass, replace
from uuid import UUID

from .exceptions import ChargeDeclined, CustomerNotFound, UnsupportedCurrency
from .models import Currency, PaymentRequest
from .ports import CardPaymentCharger, CustomerRepository, PaymentRepository

ACCEPTED_CURRENCIES: frozenset[Currency] = frozenset({Currency.USD})


@dataclass
class PaymentService:
    """
    Domain service for charging a customer's card.

    Holds no state besides its collaborators, so a single instance can
    serve concurrent callers.
    """

    customer_repository: CustomerRepository
    payment_repository: PaymentRepository
    card_charger: CardPaymentCharger

    def charge_card(self, customer_id: UUID, request: PaymentRequest) -> None:
        """
        Charge the card described by the request and record the payment.

        Args:
            customer_id: Verified identifier of the paying customer
            request: Payment request; its embedded customer_id is ignored

        Raises:
            CustomerNotFound: If no customer has this id
            UnsupportedCurrency: If the currency is not accepted
            ChargeDeclined: If the charger did not debit the card
        """
        if self.customer_repository.find_by_id(customer_id) is None:
            raise CustomerNotFound(customer_id)

        payment = request.payment
        if payment.currency not in ACCEPTED_CURRENCIES:
            raise UnsupportedCurrency(payment.currency)

        outcome = self.card_charger.charge_card(
            payment.source,
            payment.amount,
            payment.currency,
            payment.description,
        )
        if not outcome.success:
            raise ChargeDeclined(customer_id)

        self.payment_repository.save(replace(payment, customer_id=customer_id))
