"""Report aggregation and schema validation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from collections.abc import Iterable

from jsonschema import Draft202012Validator

from .errors import ReportValidationError
from .models import (
    ComplianceResult,
    ComplianceSummary,
    IdentifierValidationResult,
    RegistrationInfoStatus,
    VerificationResult,
)

REPORT_VERSION = "1"
REPORT_SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "report.schema.json"


def aggregate(
    *,
    settings: Iterable[ComplianceResult],
    organization: dict[str, str],
    module: dict[str, object],
    registration_info: RegistrationInfoStatus,
    npi_validation: IdentifierValidationResult | None,
    verification: VerificationResult | None,
    published_urls_page: str,
    registration: dict[str, str],
) -> dict[str, Any]:
    """Combine the individual check results into a single report dict.

    ``settings`` keeps the rule table order. ``npi_validation`` is None when no
    NPI is configured and ``verification`` is None when the published-page
    lookup was skipped.
    """

    results = list(settings)
    summary = ComplianceSummary.from_results(results)

    report: dict[str, Any] = {
        "version": REPORT_VERSION,
        "allSettingsValid": summary.failed == 0,
        "settings": [result.to_dict() for result in results],
        "summary": summary.to_dict(),
        "organization": dict(organization),
        "module": dict(module),
        "registrationInfo": registration_info.to_dict(),
        "npiValidation": npi_validation.to_dict() if npi_validation is not None else None,
        "verification": verification.to_dict() if verification is not None else None,
        "publishedUrlsPage": published_urls_page,
        "registration": dict(registration),
    }

    return report


def has_failures(report: dict[str, Any]) -> bool:
    """Return True when a required setting fails or the configured NPI is invalid."""
    if not report.get("allSettingsValid", False):
        return True
    npi = report.get("npiValidation")
    return bool(npi) and not npi.get("valid", False)


def _load_schema(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def validate_report(report: dict[str, Any], schema_path: Path = REPORT_SCHEMA_PATH) -> None:
    """Raise ReportValidationError if ``report`` does not match the schema."""
    validator = Draft202012Validator(_load_schema(schema_path))
    errors = sorted(validator.iter_errors(report), key=lambda e: [str(p) for p in e.path])
    if errors:
        raise ReportValidationError("\n" + _format_errors(errors))
