"""Check whether this installation's FHIR endpoint is publicly listed.

The OpenEMR project publishes the Service Base URLs of registered
installations on a wiki page. Registration is confirmed by fetching that page
and looking for the installation's FHIR endpoint in its body.

Results are cached per verifier for ``CACHE_TTL_SECONDS``, including failures,
so repeated dashboard loads during an outage do not hit the wiki each time.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable

from packaging.version import InvalidVersion, Version

from ..config import ConfigurationSource, ModuleConfig, derive_fhir_endpoint
from ..errors import ConfigError, PageFetchError
from ..models import VerificationResult
from .fetcher import DEFAULT_TIMEOUT, PageFetcher, fetch_page

logger = logging.getLogger(__name__)

CACHE_TTL_SECONDS = 300.0
DEFAULT_HOST_VERSION = "7.0.2"
LISTING_PAGE_TEMPLATE = (
    "https://www.open-emr.org/wiki/index.php/OpenEMR_{version}_API_Service_Base_URLs"
)

ERROR_ENDPOINT_NOT_CONFIGURED = "FHIR endpoint not configured"
ERROR_PAGE_UNAVAILABLE = "Unable to fetch published URLs page"


def derive_expected_endpoint(site_base_url: str) -> str:
    """Return the FHIR endpoint expected for a site address ("" when unset)."""
    return derive_fhir_endpoint(site_base_url)


def _listing_page_for(host_version: str) -> str:
    try:
        version = Version(host_version)
    except InvalidVersion as exc:
        raise ConfigError(f"Invalid OpenEMR version '{host_version}'") from exc
    return LISTING_PAGE_TEMPLATE.format(
        version=f"{version.major}.{version.minor}.{version.micro}"
    )


class EndpointRegistrationVerifier:
    """Look up the FHIR endpoint on the published URLs page, with a TTL cache.

    Params:
        source: host settings; the endpoint comes from the explicit module
            setting when present, otherwise from ``site_addr_oath``
        fetcher: ``(url, timeout) -> bytes``, raising PageFetchError or OSError
        clock: monotonic seconds
        ttl: how long a result (success or failure) is reused
        host_version: OpenEMR release whose listing page is checked
    """

    def __init__(
        self,
        source: ConfigurationSource,
        fetcher: PageFetcher = fetch_page,
        clock: Callable[[], float] = time.monotonic,
        ttl: float = CACHE_TTL_SECONDS,
        host_version: str = DEFAULT_HOST_VERSION,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._config = ModuleConfig(source)
        self._fetcher = fetcher
        self._clock = clock
        self._ttl = ttl
        self._timeout = timeout
        self._listing_page_url = _listing_page_for(host_version)
        self._lock = threading.Lock()
        self._cached: VerificationResult | None = None
        self._cached_at: float | None = None

    derive_expected_endpoint = staticmethod(derive_expected_endpoint)

    def listing_page_url(self) -> str:
        return self._listing_page_url

    def expected_endpoint(self) -> str:
        return self._config.fhir_endpoint()

    def clear_cache(self) -> None:
        with self._lock:
            self._cached = None
            self._cached_at = None

    def cached_result(self) -> VerificationResult | None:
        """Return the cached result if it is still fresh, without fetching."""
        with self._lock:
            return self._fresh_cache(self._clock())

    def verify(self) -> VerificationResult:
        with self._lock:
            now = self._clock()
            cached = self._fresh_cache(now)
            if cached is not None:
                logger.debug("Using cached registration verification result")
                return cached

            result = self._check()
            # The TTL runs from when the result was produced, not requested.
            self._cached = result
            self._cached_at = self._clock()
            return result

    def _fresh_cache(self, now: float) -> VerificationResult | None:
        if self._cached is None or self._cached_at is None:
            return None
        if now - self._cached_at >= self._ttl:
            return None
        return self._cached

    def _check(self) -> VerificationResult:
        endpoint = self.expected_endpoint()
        if endpoint == "":
            return VerificationResult.unavailable(ERROR_ENDPOINT_NOT_CONFIGURED)

        url = self._listing_page_url
        try:
            payload = self._fetcher(url, self._timeout)
        except (PageFetchError, OSError) as exc:
            logger.error(
                "Failed to fetch published URLs page %s: %s", url, exc, extra={"url": url}
            )
            return VerificationResult.unavailable(ERROR_PAGE_UNAVAILABLE)

        page = payload.decode("utf-8", errors="replace")
        # Listings may carry the endpoint with or without a trailing slash.
        normalized = endpoint.rstrip("/")
        registered = normalized in page or f"{normalized}/" in page
        logger.debug(
            "Endpoint %s registered=%s", normalized, registered, extra={"endpoint": normalized}
        )
        return VerificationResult(registered=registered)
