"""wifikey -- Client for WifiKeyboard devices.

Sends text and key events to an Android device running the WifiKeyboard
app over its HTTP interface. Every command carries a sequence number
that must match the one the device expects, so the Session keeps a
local copy of it, synchronized by a handshake against the status page.
"""

from wifikey.errors import (
    DeviceRejected,
    InvalidStateError,
    ProtocolError,
    TransportError,
    WifiKeyError,
)
from wifikey.protocol.keycodes import KeyCode
from wifikey.session import Session

__version__ = "0.1.0"

__all__ = [
    "DeviceRejected",
    "InvalidStateError",
    "KeyCode",
    "ProtocolError",
    "Session",
    "TransportError",
    "WifiKeyError",
]
