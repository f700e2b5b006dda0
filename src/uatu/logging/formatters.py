"""
Console rendering for log messages.
"""

from __future__ import annotations

from datetime import datetime

from .types import Message

# =============================================================================
# Console Formatter
# =============================================================================


class ConsoleFormatter:
    """Renders ``[Level] YYYY-MM-DD HH:MM:SS TZ service - text`` lines."""

    TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %Z"
    SEPARATOR = " - "

    @classmethod
    def format_timestamp(cls, millis: int) -> str:
        """Local time, truncated to whole seconds."""
        return datetime.fromtimestamp(millis // 1000).astimezone().strftime(cls.TIMESTAMP_FORMAT)

    @classmethod
    def format(cls, message: Message) -> str:
        return "".join(
            [
                f"[{message.level.text}] ",
                cls.format_timestamp(message.time),
                " ",
                message.service_name,
                cls.SEPARATOR,
                message.text,
            ]
        )


def render(message: Message) -> str:
    """Human-readable console line for ``message``; no newline is added."""
    return ConsoleFormatter.format(message)
