"""
Registration domain service - Customer sign-up by phone number.

Pipeline:
    validate phone number -> look up current owner -> save or reject

Outcomes of the owner lookup:
- no owner:                 assign an id if absent, save (only persisting path)
- owner equal to candidate: resubmission of the same record, no-op
- any other owner:          PhoneNumberTaken

Note: Uniqueness is checked here but must also be enforced by the
repository; two concurrent registrations can both pass the lookup.
"""

import uuid
from dataclasses import dataclass, replace

from .exceptions import InvalidPhoneNumber, PhoneNumberTaken
from .models import Customer, CustomerRegistrationRequest
from .ports import CustomerRepository, PhoneNumberValidator


@dataclass
class RegistrationService:
    """
    Domain service for customer registration.

    Orchestrates the registration flow: phone number validation,
    uniqueness check, identity assignment and persistence.
    """

    customer_repository: CustomerRepository
    phone_number_validator: PhoneNumberValidator

    def register_new_customer(self, request: CustomerRegistrationRequest) -> None:
        """
        Register the customer carried by the request.

        Args:
            request: Registration request wrapping the candidate customer

        Raises:
            InvalidPhoneNumber: If the validator rejects the phone number
            PhoneNumberTaken: If a different customer owns the phone number
        """
        candidate = request.customer
        phone_number = candidate.phone_number

        if not self.phone_number_validator.is_valid(phone_number):
            raise InvalidPhoneNumber(phone_number)

        existing = self.customer_repository.find_by_phone_number(phone_number)
        if existing is None:
            self.customer_repository.save(self._assign_id_if_absent(candidate))
            return

        if existing == candidate:
            return

        raise PhoneNumberTaken(phone_number)

    @staticmethod
    def _assign_id_if_absent(customer: Customer) -> Customer:
        """Return the customer with a fresh UUID4 id unless one was supplied."""
        if customer.id is not None:
            return customer
        return replace(customer, id=uuid.uuid4())
