# src/moneycalc/adapters/providers/http.py
"""
HTTP JSON Fetcher

This module implements the GET-and-return-body client used by all
Frankfurter loaders. Transport failures, non-200 statuses and unreadable
bodies all surface as RemoteFetchError; nothing is retried.

Files that USE this module:
- moneycalc.app (creates the shared fetcher)
- tests.test_providers (unit tests)

Files that this module USES:
- moneycalc.adapters.providers.base (JsonFetcher interface)
- moneycalc.config (settings for HTTP timeout)
- moneycalc.domain.errors (RemoteFetchError)
"""
import logging
from typing import Optional

import requests

from moneycalc.adapters.providers.base import JsonFetcher
from moneycalc.config import settings
from moneycalc.domain.errors import RemoteFetchError

log = logging.getLogger(__name__)


class RequestsJsonFetcher(JsonFetcher):
    def __init__(self, timeout: Optional[int] = None, session: Optional[requests.Session] = None):
        """
        Initialize the fetcher.

        Args:
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
            session: Optional requests session to reuse connections
        """
        self.timeout = timeout or settings.http_timeout_seconds
        self.session = session

    def fetch(self, url: str) -> str:
        """
        GET ``url`` with an ``Accept: application/json`` header.

        Returns:
            The response body as text

        Raises:
            RemoteFetchError: If the request fails, times out, or the status is not 200
        """
        get = self.session.get if self.session is not None else requests.get
        try:
            log.debug("GET %s", url)
            resp = get(url, headers={"Accept": "application/json"}, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            log.warning("Request timed out after %d seconds: %s", self.timeout, url)
            raise RemoteFetchError(f"Request timed out after {self.timeout}s: {url}") from e
        except requests.exceptions.RequestException as e:
            log.warning("Request failed (network/connection error): %s", e)
            raise RemoteFetchError(f"Request failed: {e}") from e

        if resp.status_code != 200:
            log.error("Unexpected HTTP status %d for %s", resp.status_code, url)
            raise RemoteFetchError(f"Error: HTTP {resp.status_code}")

        try:
            return resp.text
        except (requests.exceptions.RequestException, UnicodeDecodeError) as e:
            log.error("Could not read response body from %s: %s", url, e)
            raise RemoteFetchError(f"Could not read response body: {e}") from e
