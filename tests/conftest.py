"""Shared test fixtures for the wifikey test suite.

Provides a mock transport that records every URL requested and a
Session bound to it, so tests can assert on exact wire requests
without a device.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from wifikey.session import Session
from wifikey.transport.base import Transport

DEVICE_ADDRESS = "10.0.0.5"
BASE_URL = f"http://{DEVICE_ADDRESS}:7777"


def status_page(sequence: int | str) -> str:
    """A minimal status page as served by the device."""
    return (
        "<html><head><script>\n"
        f"var seqConfirmed = {sequence};\n"
        "</script></head><body>WiFi Keyboard</body></html>"
    )


def requested_urls(transport: MagicMock) -> list[str]:
    """URLs passed to perform_request, in call order."""
    return [c.args[0] for c in transport.perform_request.call_args_list]


# ---------------------------------------------------------------------------
# Transport / Session Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_transport() -> MagicMock:
    """A Transport whose requests all succeed with ``ok``."""
    transport = MagicMock(spec=Transport)
    transport.perform_request.return_value = "ok"
    return transport


@pytest.fixture
def session(mock_transport: MagicMock) -> Session:
    """A Session at sequence 10 bound to the mock transport."""
    return Session(DEVICE_ADDRESS, 10, mock_transport)
