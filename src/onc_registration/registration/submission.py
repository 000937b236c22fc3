"""Build the registration email sent to the OpenEMR project."""

from __future__ import annotations

from urllib.parse import quote

from ..config import ModuleConfig
from ..models import RegistrationInfoStatus

REGISTRATION_EMAIL = "hello@open-emr.org"
REGISTRATION_SUBJECT = "ONC registration"


def check_registration_info(config: ModuleConfig) -> RegistrationInfoStatus:
    """List the organization details still missing, with where to set them."""
    missing: list[str] = []

    if config.org_name() == "":
        missing.append("Organization Name (set in Admin > Facilities on your primary facility)")
    if config.org_location() == "":
        missing.append("Organization Location (set address in Admin > Facilities)")
    if config.org_npi() == "":
        missing.append("Organization NPI (set Facility NPI in Admin > Facilities)")
    if config.fhir_endpoint() == "":
        missing.append("FHIR Endpoint (configure site_addr_oath in Globals > Connectors)")

    return RegistrationInfoStatus.from_iterable(missing)


def generate_email_body(config: ModuleConfig) -> str:
    lines = [
        f"Organization Name: {config.org_name()}",
        "",
        f"Organization Location: {config.org_location()}",
        "",
        f"Organization NPI: {config.org_npi()}",
        "",
        f"FHIR Endpoint URL: {config.fhir_endpoint()}",
        "",
        "---",
        "Submitted via ONC Registration Module",
    ]
    return "\n".join(lines)


def generate_mailto_link(config: ModuleConfig) -> str:
    subject = quote(REGISTRATION_SUBJECT, safe="")
    body = quote(generate_email_body(config), safe="")
    return f"mailto:{REGISTRATION_EMAIL}?subject={subject}&body={body}"
