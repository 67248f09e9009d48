"""Request transports for wifikey.

Public API:
    Transport -- Abstract base class
    HttpTransport -- httpx-backed default transport
"""

from wifikey.transport.base import Transport

__all__ = ["Transport", "HttpTransport"]


def __getattr__(name: str) -> type:
    """Lazy import for the httpx-backed transport."""
    if name == "HttpTransport":
        from wifikey.transport.http_backend import HttpTransport
        return HttpTransport
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
