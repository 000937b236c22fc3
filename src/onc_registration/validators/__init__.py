"""Settings and NPI validators."""

from .npi import NPI_PREFIX, IdentifierValidator, luhn_checksum_valid
from .settings import SettingsComplianceChecker

__all__ = [
    "NPI_PREFIX",
    "IdentifierValidator",
    "SettingsComplianceChecker",
    "luhn_checksum_valid",
]
