"""Tests for the HTTP page fetcher."""

from types import SimpleNamespace

import pytest
import requests

from onc_registration.errors import PageFetchError
from onc_registration.registration import fetcher


class TestFetchPage:
    """Tests for fetch_page with requests.get patched."""

    def test_returns_body(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a 200 response returns the raw content."""
        seen = {}

        def fake_get(url, headers, timeout):
            seen.update(url=url, headers=headers, timeout=timeout)
            return SimpleNamespace(status_code=200, content=b"page")

        monkeypatch.setattr(fetcher.requests, "get", fake_get)

        assert fetcher.fetch_page("https://example.org/page", 3.0) == b"page"
        assert seen["headers"] == {"User-Agent": fetcher.USER_AGENT}
        assert seen["timeout"] == 3.0

    def test_non_200(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test an HTTP error status raises PageFetchError."""
        monkeypatch.setattr(
            fetcher.requests, "get", lambda url, headers, timeout: SimpleNamespace(status_code=503, content=b"")
        )

        with pytest.raises(PageFetchError, match="503"):
            fetcher.fetch_page("https://example.org/page")

    def test_transport_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a requests exception is wrapped exactly once, with no retry."""
        calls = []

        def boom(url, headers, timeout):
            calls.append(url)
            raise requests.ConnectionError("refused")

        monkeypatch.setattr(fetcher.requests, "get", boom)

        with pytest.raises(PageFetchError, match="refused"):
            fetcher.fetch_page("https://example.org/page")
        assert len(calls) == 1
