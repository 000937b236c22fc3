"""Exceptions raised by the onc-registration package."""

from __future__ import annotations


class OncRegistrationError(RuntimeError):
    """Base error for the package."""


class ConfigError(OncRegistrationError):
    """Raised when settings cannot be loaded or are invalid."""


class PageFetchError(OncRegistrationError):
    """Raised when the published URLs page cannot be fetched."""


class ReportValidationError(ValueError):
    """Raised when a dashboard report does not match the report schema."""
