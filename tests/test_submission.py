"""Tests for registration submission helpers."""

from urllib.parse import unquote

import pytest

from onc_registration.config import MappingConfigSource, ModuleConfig
from onc_registration.registration import (
    REGISTRATION_EMAIL,
    REGISTRATION_SUBJECT,
    check_registration_info,
    generate_email_body,
    generate_mailto_link,
)


def _config(name: str, location: str, npi: str, endpoint: str) -> ModuleConfig:
    return ModuleConfig(
        MappingConfigSource(
            {
                "oce_onc_registration_org_name": name,
                "oce_onc_registration_org_location": location,
                "oce_onc_registration_org_npi": npi,
                "oce_onc_registration_fhir_endpoint": endpoint,
            }
        )
    )


class TestEmailBody:
    """Tests for generate_email_body."""

    def test_includes_all_organization_info(self) -> None:
        """Test every field appears with its label."""
        body = generate_email_body(
            _config(
                "Acme Medical Center",
                "123 Main St, Springfield, IL 62701",
                "1234567893",
                "https://emr.example.com/apis/default/fhir/r4",
            )
        )

        assert "Organization Name: Acme Medical Center" in body
        assert "Organization Location: 123 Main St, Springfield, IL 62701" in body
        assert "Organization NPI: 1234567893" in body
        assert "FHIR Endpoint URL: https://emr.example.com/apis/default/fhir/r4" in body
        assert body.endswith("Submitted via ONC Registration Module")

    def test_empty_values(self) -> None:
        """Test labels are present even when values are empty."""
        body = generate_email_body(_config("", "", "", ""))

        assert "Organization Name: \n" in body
        assert "FHIR Endpoint URL: \n" in body


class TestMailtoLink:
    """Tests for generate_mailto_link."""

    def test_address_subject_and_body(self) -> None:
        """Test the link targets the registration address with encoded parts."""
        config = _config("Test Org", "Test Location", "1234567893", "https://test.com/fhir")

        link = generate_mailto_link(config)

        assert link.startswith(f"mailto:{REGISTRATION_EMAIL}?")
        assert "subject=ONC%20registration" in link
        body = link.split("&body=", 1)[1]
        assert " " not in body
        assert unquote(body) == generate_email_body(config)

    def test_constants(self) -> None:
        """Test the registration address and subject."""
        assert REGISTRATION_EMAIL == "hello@open-emr.org"
        assert REGISTRATION_SUBJECT == "ONC registration"


class TestCheckRegistrationInfo:
    """Tests for check_registration_info."""

    def test_complete(self) -> None:
        """Test no hints when everything is set."""
        status = check_registration_info(_config("Acme", "123 Main St", "1234567893", "https://x/fhir"))

        assert status.complete is True
        assert status.missing == ()

    @pytest.mark.parametrize(
        "fields,expected",
        [
            (("", "loc", "1234567893", "https://x/fhir"), "Organization Name"),
            (("Acme", "", "1234567893", "https://x/fhir"), "Organization Location"),
            (("Acme", "loc", "", "https://x/fhir"), "Organization NPI"),
            (("Acme", "loc", "1234567893", ""), "FHIR Endpoint"),
        ],
    )
    def test_single_missing_field(self, fields, expected: str) -> None:
        """Test each missing field produces one hint."""
        status = check_registration_info(_config(*fields))

        assert status.complete is False
        assert len(status.missing) == 1
        assert expected in status.missing[0]

    def test_everything_missing(self) -> None:
        """Test all four hints in order."""
        status = check_registration_info(_config("", "", "", ""))

        assert len(status.missing) == 4
        assert status.to_dict()["complete"] is False
