"""WifiKeyboard wire protocol: key codes and the command encoder.

Public API:
    KeyCode -- Known key codes
    Command -- One encoded request to the key endpoint
    encode_text / encode_key_down / encode_key_up -- Command builders
    parse_confirmed_sequence -- Handshake status page parser
    check_response -- Command response validation
"""

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
from wifikey.protocol.keycodes import KeyCode, key_name_to_code

__all__ = [
    "DEFAULT_PORT",
    "Command",
    "KeyCode",
    "check_response",
    "encode_key_down",
    "encode_key_up",
    "encode_text",
    "key_name_to_code",
    "parse_confirmed_sequence",
    "status_url",
]
