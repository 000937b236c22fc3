"""Shared fixtures for the onc-registration tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

import pytest

from onc_registration.errors import PageFetchError


COMPLIANT_SETTINGS: dict[str, str] = {
    "gbl_fhir_rest_api": "1",
    "oauth_hash_algo": "SHA512",
    "oauth_token_hash_algo": "SHA512",
    "enable_auditlog_encryption": "1",
}


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeFetcher:
    """Records calls and returns a canned body or raises PageFetchError."""

    def __init__(self, body: bytes = b"", fail: bool = False) -> None:
        self.body = body
        self.fail = fail
        self.calls: list[tuple[str, float]] = []

    def __call__(self, url: str, timeout: float) -> bytes:
        self.calls.append((url, timeout))
        if self.fail:
            raise PageFetchError("connection refused")
        return self.body


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def compliant_settings() -> dict[str, Any]:
    return dict(COMPLIANT_SETTINGS)


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Drop handlers installed by setup_logging so streams do not leak between tests."""
    logger = logging.getLogger("onc_registration")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)
