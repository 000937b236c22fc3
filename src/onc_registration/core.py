"""Core entrypoint that runs every check for one dashboard request.

This module MUST NOT depend on how the host renders or transports the report
so it can be used by both the host integration and the CLI.
"""

from __future__ import annotations

import logging
from typing import Any

from .config import ConfigurationSource, ModuleConfig
from .models import IdentifierValidationResult
from .registration import (
    REGISTRATION_EMAIL,
    REGISTRATION_SUBJECT,
    EndpointRegistrationVerifier,
    check_registration_info,
    generate_email_body,
    generate_mailto_link,
)
from .report import aggregate
from .validators import IdentifierValidator, SettingsComplianceChecker

logger = logging.getLogger(__name__)


def build_dashboard_report(
    source: ConfigurationSource,
    verifier: EndpointRegistrationVerifier | None = None,
    verify: bool = True,
) -> dict[str, Any]:
    """Run the settings, NPI and published-endpoint checks.

    Params:
        source: host settings
        verifier: reuse a long-lived verifier so its cache survives across
            requests; a fresh one is built when None
        verify: when False the published URLs page is not fetched and the
            report's ``verification`` is null

    Returns: dict report matching schemas/report.schema.json
    """
    config = ModuleConfig(source)
    if verifier is None:
        verifier = EndpointRegistrationVerifier(source)

    checker = SettingsComplianceChecker(source)
    settings = checker.evaluate_all()

    npi = config.org_npi()
    npi_validation: IdentifierValidationResult | None = None
    if npi != "":
        npi_validation = IdentifierValidator().validate(npi)

    verification = verifier.verify() if verify else None

    logger.debug(
        "Built dashboard report: %d settings, npi=%s, verification=%s",
        len(settings),
        "unset" if npi_validation is None else npi_validation.valid,
        "skipped" if verification is None else verification.registered,
    )

    return aggregate(
        settings=settings.values(),
        organization={
            "name": config.org_name(),
            "location": config.org_location(),
            "npi": npi,
            "fhirEndpoint": config.fhir_endpoint(),
            "detectedFhirEndpoint": config.detect_fhir_endpoint(),
        },
        module={
            "enabled": config.is_enabled(),
            "configured": config.is_configured(),
            "registrationDate": config.registration_date(),
            "registrationStatus": config.registration_status(),
        },
        registration_info=check_registration_info(config),
        npi_validation=npi_validation,
        verification=verification,
        published_urls_page=verifier.listing_page_url(),
        registration={
            "email": REGISTRATION_EMAIL,
            "subject": REGISTRATION_SUBJECT,
            "mailto": generate_mailto_link(config),
            "emailBody": generate_email_body(config),
        },
    )
