"""Published-endpoint verification and registration submission helpers."""

from .fetcher import DEFAULT_TIMEOUT, USER_AGENT, PageFetcher, fetch_page
from .submission import (
    REGISTRATION_EMAIL,
    REGISTRATION_SUBJECT,
    check_registration_info,
    generate_email_body,
    generate_mailto_link,
)
from .verifier import (
    CACHE_TTL_SECONDS,
    DEFAULT_HOST_VERSION,
    ERROR_ENDPOINT_NOT_CONFIGURED,
    ERROR_PAGE_UNAVAILABLE,
    EndpointRegistrationVerifier,
    derive_expected_endpoint,
)

__all__ = [
    # Fetching
    "DEFAULT_TIMEOUT",
    "USER_AGENT",
    "PageFetcher",
    "fetch_page",
    # Verification
    "CACHE_TTL_SECONDS",
    "DEFAULT_HOST_VERSION",
    "ERROR_ENDPOINT_NOT_CONFIGURED",
    "ERROR_PAGE_UNAVAILABLE",
    "EndpointRegistrationVerifier",
    "derive_expected_endpoint",
    # Submission
    "REGISTRATION_EMAIL",
    "REGISTRATION_SUBJECT",
    "check_registration_info",
    "generate_email_body",
    "generate_mailto_link",
]
