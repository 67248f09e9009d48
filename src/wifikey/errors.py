"""Exception hierarchy for wifikey.

Every failure raised by a Session operation derives from WifiKeyError,
so callers can catch one type around a batch of commands.
"""

from __future__ import annotations


class WifiKeyError(Exception):
    """Base class for all wifikey errors."""

    def __init__(self, message: str, address: str = "") -> None:
        super().__init__(message)
        self.address = address


class TransportError(WifiKeyError):
    """The HTTP request could not be completed.

    No local state is mutated when this is raised, so the same
    operation can be retried.
    """


class ProtocolError(WifiKeyError):
    """The status page did not carry a usable confirmed sequence."""


class InvalidStateError(WifiKeyError):
    """The device reported a sequence number below 1."""


class DeviceRejected(WifiKeyError):
    """The device answered a command with something other than ``ok``.

    The raw response body is kept verbatim in ``response``.
    """

    def __init__(self, response: str, address: str = "") -> None:
        super().__init__(response, address=address)
        self.response = response
