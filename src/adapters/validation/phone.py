"""
Phone number validator adapter - Implements PhoneNumberValidator protocol.

Accepts numbers written in international form for a single country:
the country prefix followed by the subscriber number, with a fixed total
length (e.g. "+447000000000" for the defaults).
"""

import logging

logger = logging.getLogger(__name__)


class PrefixPhoneNumberValidator:
    """
    Implements PhoneNumberValidator protocol via prefix and length checks.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, prefix: str = "+44", length: int = 13) -> None:
        self._prefix = prefix
        self._length = length

    def is_valid(self, phone_number: str) -> bool:
        valid = phone_number.startswith(self._prefix) and len(phone_number) == self._length
        if not valid:
            logger.debug("Rejected phone number %s", phone_number)
        return valid
