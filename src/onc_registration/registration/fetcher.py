"""Fetch the published Service Base URLs page."""

from __future__ import annotations

from typing import TypeAlias
from collections.abc import Callable

import requests

from ..errors import PageFetchError

USER_AGENT = "OpenEMR ONC Registration Module"
DEFAULT_TIMEOUT = 10.0

# (url, timeout seconds) -> page body; raises PageFetchError on failure.
PageFetcher: TypeAlias = Callable[[str, float], bytes]


def fetch_page(url: str, timeout: float = DEFAULT_TIMEOUT) -> bytes:
    """Return the raw page body. Makes exactly one request and never retries."""

    try:
        response = requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=timeout)
    except requests.RequestException as exc:
        raise PageFetchError(f"Failed to fetch {url}: {exc}") from exc

    if response.status_code != 200:
        raise PageFetchError(f"Unexpected status code {response.status_code} fetching {url}")

    return response.content
