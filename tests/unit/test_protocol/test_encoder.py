"""Tests for request construction and response validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from wifikey.errors import DeviceRejected
from wifikey.protocol.encoder import (
    Command,
    check_response,
    encode_key_down,
    encode_key_up,
    encode_text,
    parse_confirmed_sequence,
    status_url,
)

from conftest import status_page


class TestParseConfirmedSequence:
    def test_extracts_value(self) -> None:
        assert parse_confirmed_sequence(status_page(42)) == 42

    def test_extracts_zero(self) -> None:
        assert parse_confirmed_sequence(status_page(0)) == 0

    def test_missing_marker(self) -> None:
        assert parse_confirmed_sequence("<html>nothing here</html>") is None

    def test_empty_body(self) -> None:
        assert parse_confirmed_sequence("") is None

    def test_negative_value_does_not_match(self) -> None:
        assert parse_confirmed_sequence(status_page(-1)) is None

    def test_requires_exact_spacing(self) -> None:
        assert parse_confirmed_sequence("seqConfirmed=5;") is None

    def test_conflicting_matches_are_rejected(self) -> None:
        body = "seqConfirmed = 5; seqConfirmed = 6;"
        assert parse_confirmed_sequence(body) is None

    def test_oversized_literal_is_rejected(self) -> None:
        body = "seqConfirmed = " + "9" * 5000 + ";"
        assert parse_confirmed_sequence(body) is None

    def test_repeated_identical_matches_are_accepted(self) -> None:
        body = "seqConfirmed = 7; seqConfirmed = 7;"
        assert parse_confirmed_sequence(body) == 7


class TestEncodeText:
    def test_two_characters(self) -> None:
        command = encode_text("AB", 10)
        assert command.sequence == 11
        assert command.payload == "C66,C65,"
        assert command.query == "11,C66,C65,"

    def test_single_character_uses_current_sequence(self) -> None:
        command = encode_text("x", 3)
        assert command.sequence == 3
        assert command.payload == "C120,"

    def test_first_character_fragment_is_last(self) -> None:
        command = encode_text("abc", 1)
        assert command.payload == "C99,C98,C97,"
        assert command.sequence == 3

    def test_non_ascii_uses_codepoint(self) -> None:
        command = encode_text("é€", 1)
        assert command.payload == f"C{ord('€')},C{ord('é')},"

    def test_empty_text_raises(self) -> None:
        with pytest.raises(ValueError):
            encode_text("", 1)


class TestEncodeKeyEvents:
    def test_key_down(self) -> None:
        assert encode_key_down(13, 5).query == "5,D13,"

    def test_key_up(self) -> None:
        assert encode_key_up(46, 5).query == "5,U46,"

    def test_unknown_code_passes_through(self) -> None:
        assert encode_key_down(999, 1).payload == "D999,"


class TestCommand:
    def test_url(self) -> None:
        command = Command(sequence=11, payload="C66,C65,")
        assert command.url("10.0.0.5") == "http://10.0.0.5:7777/key?11,C66,C65,"

    def test_url_custom_port(self) -> None:
        command = Command(sequence=1, payload="D13,")
        assert command.url("host", 8000) == "http://host:8000/key?1,D13,"

    def test_is_frozen(self) -> None:
        command = Command(sequence=1, payload="D13,")
        with pytest.raises(ValidationError):
            command.sequence = 2  # type: ignore[misc]

    def test_rejects_sequence_below_one(self) -> None:
        with pytest.raises(ValidationError):
            Command(sequence=0, payload="D13,")


class TestStatusUrl:
    def test_default_port(self) -> None:
        assert status_url("10.0.0.5") == "http://10.0.0.5:7777/"


class TestCheckResponse:
    def test_ok(self) -> None:
        check_response("ok")

    def test_other_body_raises_verbatim(self) -> None:
        with pytest.raises(DeviceRejected) as exc_info:
            check_response("wrong sequence", address="10.0.0.5")
        assert exc_info.value.response == "wrong sequence"
        assert str(exc_info.value) == "wrong sequence"
        assert exc_info.value.address == "10.0.0.5"

    @pytest.mark.parametrize("body", ["OK", "ok\n", " ok", ""])
    def test_near_misses_are_rejected(self, body: str) -> None:
        with pytest.raises(DeviceRejected):
            check_response(body)
