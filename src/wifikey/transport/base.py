"""Abstract base class for the request transport.

The Session only needs one blocking operation from its transport: GET
a URL and return the response body as text. Keeping that behind an
interface lets tests and callers plug in their own HTTP stack, timeouts
or cancellation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Transport(ABC):
    """Performs a single blocking GET request."""

    @abstractmethod
    def perform_request(self, url: str) -> str:
        """Fetch ``url`` and return the full response body.

        Raises:
            TransportError: If the request cannot be completed.
        """
        ...

    def close(self) -> None:
        """Release any held resources. Safe to call multiple times."""

    def __enter__(self) -> Transport:
        return self

    def __exit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: object) -> None:
        self.close()
