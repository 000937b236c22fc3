"""National Provider Identifier (NPI) validation.

An NPI is a 10-digit number whose last digit is a Luhn check digit computed
over the number prefixed with the health-industry issuer prefix ``80840``.
"""

from __future__ import annotations

import re

from ..models import IdentifierValidationResult

# Card issuer prefix assigned to US health applications (ISO/IEC 7812).
NPI_PREFIX = "80840"
NPI_LENGTH = 10

ERROR_LENGTH = "NPI must be exactly 10 digits"
ERROR_DIGITS = "NPI must contain only digits"
ERROR_CHECK_DIGIT = "NPI has an invalid check digit"

_SEPARATORS = re.compile(r"[\s\-]")
_ASCII_DIGITS = frozenset("0123456789")


def luhn_checksum_valid(number: str) -> bool:
    """Return True when ``number`` (ASCII digits only) passes the Luhn check."""
    total = 0
    for position, char in enumerate(reversed(number)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


class IdentifierValidator:
    """Validate NPI strings typed by users.

    Whitespace and hyphens are ignored; any other non-digit character makes
    the NPI invalid.
    """

    def validate(self, raw: str) -> IdentifierValidationResult:
        npi = _SEPARATORS.sub("", raw)

        if len(npi) != NPI_LENGTH:
            return IdentifierValidationResult.invalid(ERROR_LENGTH)

        # str.isdigit() accepts non-ASCII digits such as "٣"
        if not set(npi) <= _ASCII_DIGITS:
            return IdentifierValidationResult.invalid(ERROR_DIGITS)

        if not luhn_checksum_valid(NPI_PREFIX + npi):
            return IdentifierValidationResult.invalid(ERROR_CHECK_DIGIT)

        return IdentifierValidationResult.ok()
