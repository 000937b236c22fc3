"""Data models for the ONC registration checks."""

from __future__ import annotations

from .compliance import ComplianceResult, ComplianceSummary, RequiredSettingRule
from .npi import IdentifierValidationResult
from .registration import RegistrationInfoStatus, VerificationResult

__all__ = [
    "ComplianceResult",
    "ComplianceSummary",
    "IdentifierValidationResult",
    "RegistrationInfoStatus",
    "RequiredSettingRule",
    "VerificationResult",
]
