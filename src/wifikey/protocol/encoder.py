"""Request construction and response validation for the WifiKeyboard protocol.

Wire format (all plain HTTP GET):
    status page:  http://<host>:<port>/
                  body contains ``seqConfirmed = <N>;``
    command:      http://<host>:<port>/key?<seq>,<payload>
                  payload is ``C<codepoint>,`` repeated, ``D<code>,`` or ``U<code>,``

The device answers a command with the literal body ``ok``; anything
else is an error message.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field

from wifikey.errors import DeviceRejected

DEFAULT_PORT = 7777
OK_RESPONSE = "ok"

_SEQUENCE_PATTERN = re.compile(r"seqConfirmed = ([0-9]+);")


class Command(BaseModel):
    """One request to the key endpoint.

    ``sequence`` is the top sequence number the request is tagged with;
    for a character batch that is the number of the first character.
    """

    model_config = ConfigDict(frozen=True)

    sequence: int = Field(ge=1)
    payload: str = Field(min_length=1)

    @property
    def query(self) -> str:
        return f"{self.sequence},{self.payload}"

    def url(self, host: str, port: int = DEFAULT_PORT) -> str:
        return f"{base_url(host, port)}/key?{self.query}"


def base_url(host: str, port: int = DEFAULT_PORT) -> str:
    return f"http://{host}:{port}"


def status_url(host: str, port: int = DEFAULT_PORT) -> str:
    """URL of the status page read during the handshake."""
    return f"{base_url(host, port)}/"


def parse_confirmed_sequence(body: str) -> int | None:
    """Extract the device's confirmed sequence number from the status page.

    Returns None when the pattern is missing, or when the page carries
    several matches that disagree. A wrong value here would make every
    later command fail, so an ambiguous page, or a literal too long to
    convert, is treated as no value.
    """
    try:
        values = {int(m) for m in _SEQUENCE_PATTERN.findall(body)}
    except ValueError:
        return None
    if len(values) != 1:
        return None
    return values.pop()


def encode_text(text: str, sequence: int) -> Command:
    """Build the batched character command for ``text``.

    Characters are numbered in reverse: the last character gets
    ``sequence`` and the first gets ``sequence + len(text) - 1``. The
    fragments are joined in reverse input order, so the first
    character's ``C<codepoint>,`` fragment ends the payload. The command
    is tagged with the highest number used.

    Raises:
        ValueError: If ``text`` is empty.
    """
    if not text:
        raise ValueError("Cannot encode an empty character batch")
    fragments = [f"C{ord(char)}," for char in text]
    fragments.reverse()
    return Command(sequence=sequence + len(text) - 1, payload="".join(fragments))


def encode_key_down(code: int, sequence: int) -> Command:
    return Command(sequence=sequence, payload=f"D{int(code)},")


def encode_key_up(code: int, sequence: int) -> Command:
    return Command(sequence=sequence, payload=f"U{int(code)},")


def check_response(body: str, address: str = "") -> None:
    """Raise DeviceRejected unless the device answered exactly ``ok``."""
    if body != OK_RESPONSE:
        raise DeviceRejected(body, address=address)
