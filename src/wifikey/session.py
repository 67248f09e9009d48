"""Session with a WifiKeyboard device.

A Session holds the device address and the next sequence number the
device expects. Only successful commands advance the counter; any
failure leaves it untouched, so the same call can be retried and will
produce an identical request.

Example usage::

    with Session.connect("192.168.1.23") as kb:
        kb.send("hello")
        kb.key_press(KeyCode.RETURN)
"""

from __future__ import annotations

import logging
from typing import Callable

from wifikey.errors import InvalidStateError, ProtocolError, WifiKeyError
from wifikey.protocol.encoder import (
    DEFAULT_PORT,
    Command,
    check_response,
    encode_key_down,
    encode_key_up,
    encode_text,
    parse_confirmed_sequence,
    status_url,
)
from wifikey.protocol.keycodes import KeyCode
from wifikey.transport.base import Transport

logger = logging.getLogger(__name__)


def _handshake(transport: Transport, address: str, port: int) -> int:
    """Read the device's confirmed sequence number from its status page."""
    body = transport.perform_request(status_url(address, port))
    sequence = parse_confirmed_sequence(body)
    if sequence is None:
        raise ProtocolError(
            "Status page has no unambiguous 'seqConfirmed = <N>;' marker",
            address=address,
        )
    if sequence < 1:
        raise InvalidStateError(
            f"Device reported unusable sequence {sequence}", address=address
        )
    return sequence


class Session:
    """Stateful handle for one WifiKeyboard device.

    Not safe for concurrent use: interleaved calls would break the
    agreement between the local and the remote sequence number.
    """

    def __init__(
        self,
        address: str,
        sequence: int,
        transport: Transport,
        port: int = DEFAULT_PORT,
    ) -> None:
        if sequence < 1:
            raise InvalidStateError(
                f"Sequence must be at least 1, got {sequence}", address=address
            )
        self._address = address
        self._port = port
        self._sequence = sequence
        self._transport = transport

    @classmethod
    def connect(
        cls,
        address: str,
        transport: Transport | None = None,
        port: int = DEFAULT_PORT,
        timeout: float = 5.0,
    ) -> Session:
        """Handshake with the device at ``address`` and open a Session.

        Args:
            address: Hostname or IP of the device, without scheme or port.
            transport: Transport to use. Defaults to an HttpTransport
                       with the given timeout.
            port: Device HTTP port.
            timeout: Request timeout for the default transport.

        Raises:
            TransportError: If the status page cannot be fetched.
            ProtocolError: If the status page has no sequence marker.
            InvalidStateError: If the reported sequence is below 1.
        """
        owned = transport is None
        if transport is None:
            from wifikey.transport.http_backend import HttpTransport
            transport = HttpTransport(timeout=timeout)
        try:
            sequence = _handshake(transport, address, port)
        except Exception as e:
            if owned:
                transport.close()
            if isinstance(e, WifiKeyError) and not e.address:
                e.address = address
            raise
        logger.info("Connected to %s:%d at sequence %d", address, port, sequence)
        return cls(address, sequence, transport, port=port)

    @property
    def address(self) -> str:
        return self._address

    @property
    def port(self) -> int:
        return self._port

    @property
    def sequence(self) -> int:
        """Next sequence number the device is expected to accept."""
        return self._sequence

    def resync(self) -> int:
        """Re-run the handshake and adopt the device's current sequence.

        Returns the new sequence number. On failure the local sequence
        is left as it was.
        """
        sequence = _handshake(self._transport, self._address, self._port)
        if sequence != self._sequence:
            logger.info(
                "Resynchronized %s: sequence %d -> %d",
                self._address, self._sequence, sequence,
            )
        self._sequence = sequence
        return sequence

    # ------------------------------------------------------------------
    # Single-request operations
    # ------------------------------------------------------------------

    def send(self, text: str) -> None:
        """Send ``text`` as character codes in one batched request.

        These are character codes, not key codes; use key_down, key_up
        or key_press for non-printable keys. An empty string sends
        nothing.
        """
        if not text:
            logger.debug("Skipping empty character batch")
            return
        self._execute(encode_text(text, self._sequence), advance=len(text))

    def key_down(self, code: int) -> None:
        """Send a key down event for ``code``."""
        self._execute(encode_key_down(code, self._sequence), advance=1)

    def key_up(self, code: int) -> None:
        """Send a key up event for ``code``."""
        self._execute(encode_key_up(code, self._sequence), advance=1)

    # ------------------------------------------------------------------
    # Composite operations
    # ------------------------------------------------------------------

    def key_press(self, code: int) -> list[WifiKeyError]:
        """Press and release ``code``, attempting both events.

        A failed key down does not stop the key up. Failures are logged
        and returned instead of raised; an empty list means both events
        were accepted. Use key_press_strict to stop on the first error.
        """
        return self._best_effort([
            (self.key_down, code),
            (self.key_up, code),
        ])

    def key_press_strict(self, code: int) -> None:
        """Press and release ``code``, raising on the first failure."""
        self.key_down(code)
        self.key_up(code)

    def clear(self) -> list[WifiKeyError]:
        """Delete the current line of the focused text box.

        Presses End, selects to the start of the line with Shift+Home
        and presses Delete. Every step is attempted even if an earlier
        one failed; the swallowed errors are returned.
        """
        errors: list[WifiKeyError] = []
        errors += self.key_press(KeyCode.END)
        errors += self._best_effort([(self.key_down, KeyCode.SHIFT)])
        errors += self.key_press(KeyCode.BEGIN)
        errors += self._best_effort([(self.key_up, KeyCode.SHIFT)])
        errors += self.key_press(KeyCode.DEL)
        return errors

    def clear_strict(self) -> None:
        """Delete the current line, raising on the first failed step."""
        self.key_press_strict(KeyCode.END)
        self.key_down(KeyCode.SHIFT)
        self.key_press_strict(KeyCode.BEGIN)
        self.key_up(KeyCode.SHIFT)
        self.key_press_strict(KeyCode.DEL)

    def send_line(self, text: str) -> None:
        """Send ``text`` followed by Return, raising on the first failure."""
        self.send(text)
        self.key_press_strict(KeyCode.RETURN)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _execute(self, command: Command, advance: int) -> None:
        url = command.url(self._address, self._port)
        try:
            body = self._transport.perform_request(url)
        except WifiKeyError as e:
            if not e.address:
                e.address = self._address
            raise
        check_response(body, address=self._address)
        self._sequence += advance
        logger.debug("Sent %s, sequence now %d", command.query, self._sequence)

    def _best_effort(self, steps: list[tuple[Callable[[int], None], int]]) -> list[WifiKeyError]:
        errors: list[WifiKeyError] = []
        for func, code in steps:
            try:
                func(code)
            except WifiKeyError as e:
                logger.warning("%s(%d) failed on %s: %s", func.__name__, code, self._address, e)
                errors.append(e)
        return errors

    def close(self) -> None:
        """Close the underlying transport."""
        self._transport.close()

    def __enter__(self) -> Session:
        return self

    def __exit__(self, exc_type: type | None, exc_val: Exception | None, exc_tb: object) -> None:
        self.close()
