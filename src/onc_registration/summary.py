"""Human-readable Markdown rendering of a dashboard report."""

from __future__ import annotations

from typing import Any


def _verification_line(verification: dict[str, Any] | None, page: str) -> str:
    if verification is None:
        return "Published endpoint check: skipped"
    if verification.get("error"):
        return f"Published endpoint check: unknown ({verification['error']})"
    if verification.get("registered"):
        return f"Published endpoint check: listed on {page}"
    return f"Published endpoint check: not listed on {page}"


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with the overall status and a settings table."""
    summary = report.get("summary", {})
    settings = report.get("settings", [])
    organization = report.get("organization", {})

    all_valid = bool(report.get("allSettingsValid"))
    status_icon = "✅" if all_valid else "❌"

    lines = []
    lines.append("# ONC Registration Summary")
    lines.append("")
    lines.append(
        f"{status_icon} Required settings: {summary.get('passed', 0)} of "
        f"{summary.get('total', 0)} passing | Failed: {summary.get('failed', 0)}"
    )
    lines.append("")
    lines.append("| Setting | Description | Required | Actual | Status |")
    lines.append("| --- | --- | --- | --- | --- |")

    for result in settings:
        actual = result.get("actual") or "(not set)"
        status = "PASS" if result.get("passed") else "FAIL"
        lines.append(
            f"| {result.get('setting', '')} | {result.get('description', '')} "
            f"| {result.get('required', '')} | {actual} | {status} |"
        )

    lines.append("")
    lines.append("## Registration")
    lines.append("")
    lines.append(f"- Organization: {organization.get('name') or '(not set)'}")
    lines.append(f"- Location: {organization.get('location') or '(not set)'}")

    npi = organization.get("npi") or ""
    npi_validation = report.get("npiValidation")
    if not npi:
        lines.append("- NPI: (not set)")
    elif npi_validation and not npi_validation.get("valid"):
        lines.append(f"- NPI: {npi} (invalid: {npi_validation.get('error')})")
    else:
        lines.append(f"- NPI: {npi} (valid)")

    lines.append(f"- FHIR endpoint: {organization.get('fhirEndpoint') or '(not set)'}")
    lines.append(
        "- " + _verification_line(report.get("verification"), report.get("publishedUrlsPage", ""))
    )

    missing = (report.get("registrationInfo") or {}).get("missing") or []
    if missing:
        lines.append("")
        lines.append("Missing registration details:")
        lines.append("")
        for item in missing:
            lines.append(f"- {item}")

    return "\n".join(lines) + "\n"
