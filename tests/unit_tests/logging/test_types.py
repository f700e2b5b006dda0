"""
Severity model and message envelope unit tests.
"""

from __future__ import annotations

import time

import orjson
import pytest

from uatu.exceptions import SerializationError
from uatu.logging.types import (
    DEBUG,
    ERROR,
    FATAL,
    INFO,
    LEVELS,
    WARNING,
    Level,
    Message,
    build_message,
    resolve_level,
)


class TestLevels:
    """Level constants and lookup"""

    def test_severities_strictly_increase(self) -> None:
        severities = [level.severity for level in LEVELS]
        assert severities == [0, 1, 2, 3, 4]
        assert [level.text for level in LEVELS] == ["Debug", "Info", "Warning", "Error", "Fatal"]

    def test_levels_order_by_severity(self) -> None:
        assert DEBUG < INFO < WARNING < ERROR < FATAL
        assert FATAL >= ERROR
        assert sorted([FATAL, DEBUG, WARNING]) == [DEBUG, WARNING, FATAL]

    def test_levels_are_immutable_and_hashable(self) -> None:
        with pytest.raises(AttributeError):
            WARNING.severity = 10  # type: ignore[misc]
        assert {WARNING: "w"}[Level(text="Warning", severity=2)] == "w"

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Debug", DEBUG),
            ("Info", INFO),
            ("Warning", WARNING),
            ("Error", ERROR),
            ("Fatal", FATAL),
            ("WARNING", WARNING),
            ("error", ERROR),
            (" debug ", DEBUG),
        ],
    )
    def test_resolve_known_names(self, name: str, expected: Level) -> None:
        assert resolve_level(name) is expected

    @pytest.mark.parametrize("name", ["", None, "verbose", "CRITICAL", "Warn"])
    def test_resolve_unknown_falls_back_to_info(self, name) -> None:
        assert resolve_level(name) is INFO


class TestMessage:
    """Message construction and wire format"""

    @pytest.fixture
    def message(self) -> Message:
        return Message(
            text="disk low",
            level=WARNING,
            service_name="svc",
            time=1700000000123,
            hostname="h1",
        )

    def test_wire_format_field_names_and_order(self, message: Message) -> None:
        assert message.to_json() == (
            b'{"text":"disk low","level":{"text":"Warning","severity":2},'
            b'"serviceName":"svc","time":1700000000123,"hostname":"h1"}'
        )

    def test_round_trip_preserves_every_field(self, message: Message) -> None:
        decoded = Message.from_json(message.to_json())
        assert decoded == message
        assert decoded.level.text == "Warning"
        assert decoded.level.severity == 2
        assert decoded.time == 1700000000123

    def test_reencoding_is_byte_identical(self, message: Message) -> None:
        data = message.to_json()
        assert Message.from_json(data).to_json() == data

    def test_decodes_payload_from_other_producers(self) -> None:
        payload = {
            "hostname": "h2",
            "time": 5,
            "serviceName": "other",
            "level": {"severity": 3, "text": "Error"},
            "text": "boom",
        }
        message = Message.from_json(orjson.dumps(payload))
        assert message.level == ERROR
        assert message.service_name == "other"

    def test_unencodable_text_raises_serialization_error(self) -> None:
        message = Message(text="bad \ud800", level=INFO, service_name="svc", time=0, hostname="h1")
        with pytest.raises(SerializationError) as exc_info:
            message.to_json()
        assert exc_info.value.code == "SERIALIZATION_FAILED"

    def test_build_message_uses_explicit_time(self) -> None:
        message = build_message("tick", DEBUG, "svc", "h1", now=42)
        assert message == Message(text="tick", level=DEBUG, service_name="svc", time=42, hostname="h1")

    def test_build_message_stamps_current_millis(self) -> None:
        before = int(time.time() * 1000)
        message = build_message("tick", DEBUG, "svc", "h1")
        after = int(time.time() * 1000)
        assert before - 1 <= message.time <= after + 1
