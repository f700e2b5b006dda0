"""
Severity levels and the message envelope shared by the console and publishers.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Dict, Optional, Tuple

import orjson

from ..exceptions import SerializationError


@total_ordering
@dataclass(frozen=True)
class Level:
    """Named severity. Levels order by ``severity`` only."""

    text: str
    severity: int

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.severity < other.severity

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "severity": self.severity}


DEBUG = Level(text="Debug", severity=0)
INFO = Level(text="Info", severity=1)
WARNING = Level(text="Warning", severity=2)
ERROR = Level(text="Error", severity=3)
FATAL = Level(text="Fatal", severity=4)

LEVELS: Tuple[Level, ...] = (DEBUG, INFO, WARNING, ERROR, FATAL)

_LEVELS_BY_TEXT = {level.text: level for level in LEVELS}
_LEVELS_BY_FOLDED_TEXT = {level.text.lower(): level for level in LEVELS}


def resolve_level(name: Optional[str]) -> Level:
    """Look up a level by name, falling back to ``INFO`` for anything unknown."""
    if not name:
        return INFO
    level = _LEVELS_BY_TEXT.get(name)
    if level is not None:
        return level
    return _LEVELS_BY_FOLDED_TEXT.get(name.strip().lower(), INFO)


@dataclass(frozen=True)
class Message:
    """A single log record as printed to the console and sent to publishers.

    ``time`` is wall-clock milliseconds since the epoch.
    """

    text: str
    level: Level
    service_name: str
    time: int
    hostname: str

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation; key names and order are part of the format."""
        return {
            "text": self.text,
            "level": self.level.to_dict(),
            "serviceName": self.service_name,
            "time": self.time,
            "hostname": self.hostname,
        }

    def to_json(self) -> bytes:
        try:
            return orjson.dumps(self.to_dict())
        except orjson.JSONEncodeError as exc:
            raise SerializationError(str(exc)) from exc

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Message":
        level = payload["level"]
        return cls(
            text=payload["text"],
            level=Level(text=level["text"], severity=int(level["severity"])),
            service_name=payload["serviceName"],
            time=int(payload["time"]),
            hostname=payload["hostname"],
        )

    @classmethod
    def from_json(cls, data: bytes | str) -> "Message":
        return cls.from_dict(orjson.loads(data))


def now_millis() -> int:
    return time.time_ns() // 1_000_000


def build_message(
    text: str,
    level: Level,
    service_name: str,
    hostname: str,
    *,
    now: Optional[int] = None,
) -> Message:
    """Create a message stamped with the current time (or ``now``, in millis)."""
    return Message(
        text=text,
        level=level,
        service_name=service_name,
        time=now_millis() if now is None else now,
        hostname=hostname,
    )
