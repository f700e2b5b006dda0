"""
Stream adapter for code that only knows how to write to a file.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .diagnostics import get_logger, in_dispatch
from .types import Level

if TYPE_CHECKING:
    from .core import Logger


_diagnostics = get_logger("uatu.writer")


class LogWriter:
    """Logs every write at a fixed level.

    Each ``write`` call becomes exactly one message; nothing is buffered.
    Writes made while this thread is already dispatching are dropped.
    Writes always report the full length as written, even when dispatch
    fails, so instrumented I/O never sees a logging error.
    """

    def __init__(self, logger: Logger, level: Level):
        self.logger = logger
        self.level = level

    def write(self, buf: str | bytes) -> int:
        if in_dispatch():
            return len(buf)
        text = buf.decode(self.encoding, errors="replace") if isinstance(buf, (bytes, bytearray)) else buf
        try:
            self.logger.dispatch(text, self.level)
        except Exception as exc:
            _diagnostics.error("writer_dispatch_failed", error=str(exc), level=self.level.text)
        return len(buf)

    def writelines(self, lines) -> None:
        for line in lines:
            self.write(line)

    def flush(self) -> None:
        pass

    def writable(self) -> bool:
        return True

    def isatty(self) -> bool:
        return False

    @property
    def encoding(self) -> str:
        return "utf-8"
