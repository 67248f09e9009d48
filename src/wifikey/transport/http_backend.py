"""HTTP transport backed by httpx.

The query string of a command URL (``<seq>,C65,...``) must reach the
device verbatim, which httpx preserves for an already-encoded URL.
"""

from __future__ import annotations

import logging

import httpx

from wifikey.errors import TransportError
from wifikey.transport.base import Transport

logger = logging.getLogger(__name__)


class HttpTransport(Transport):
    """Issues GET requests with a shared httpx client.

    The status code is not checked: the device signals errors through
    the response body, which the Session validates.
    """

    def __init__(
        self,
        timeout: float = 5.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._timeout = timeout
        self._client = client

    def perform_request(self, url: str) -> str:
        """Send a GET request and return the body text."""
        if self._client is None:
            self._client = httpx.Client(timeout=self._timeout)
        try:
            resp = self._client.get(url)
        except httpx.HTTPError as e:
            raise TransportError(f"HTTP request to {url} failed: {e}") from e
        logger.debug("GET %s -> %d", url, resp.status_code)
        return resp.text

    def close(self) -> None:
        """Close the httpx client."""
        if self._client is not None:
            self._client.close()
            self._client = None
