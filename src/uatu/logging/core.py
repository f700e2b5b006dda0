"""
Dispatch engine: the logger facade and its construction logic.
"""

from __future__ import annotations

import socket
import sys
from typing import Any, Iterable, Optional, TextIO, Tuple

from ..config import Settings
from ..exceptions import FatalLogPanic, SerializationError
from ..publishers import Publisher, build_publishers
from .diagnostics import dispatching, get_logger
from .enrich import enrich
from .formatters import render
from .io import LogWriter
from .types import DEBUG, ERROR, FATAL, INFO, WARNING, Level, Message, build_message, resolve_level

# =============================================================================
# Diagnostics
# =============================================================================


_diagnostics = get_logger("uatu.dispatch")


# =============================================================================
# Argument Formatting
# =============================================================================


def _join(args: Tuple[Any, ...]) -> str:
    return " ".join(str(arg) for arg in args)


def _format(fmt: str, args: Tuple[Any, ...]) -> str:
    """Apply ``%``-style args; a format that does not fit keeps fmt and args verbatim."""
    if not args:
        return fmt
    try:
        return fmt % args
    except (TypeError, ValueError, KeyError):
        return f"{fmt} {args!r}"


# =============================================================================
# Logger
# =============================================================================


class Logger:
    """Filters, prints and fans out log messages for one service.

    Settings and publishers are fixed at construction. Console output is
    gated by the resolved ``settings.level``; publishers receive every message
    regardless of level.

    Args:
        settings: Service name, minimum console level and console toggle.
        publishers: Remote sinks, attempted in order. Their lifecycle stays
            with the caller.
        hostname: Stamped on every message (defaults to the machine name).
        stream: Console stream (defaults to ``sys.stdout`` at write time).
    """

    def __init__(
        self,
        settings: Settings,
        publishers: Optional[Iterable[Publisher]] = None,
        *,
        hostname: Optional[str] = None,
        stream: Optional[TextIO] = None,
    ):
        self._settings = settings
        self._min_log_level = resolve_level(settings.level)
        self._publishers: Tuple[Publisher, ...] = tuple(publishers or ())
        self._hostname = socket.gethostname() if hostname is None else hostname
        self._stream = stream

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def min_log_level(self) -> Level:
        """Lowest level printed to the console."""
        return self._min_log_level

    @property
    def hostname(self) -> str:
        return self._hostname

    @property
    def publishers(self) -> Tuple[Publisher, ...]:
        return self._publishers

    # -------------------------------------------------------------------------
    # Leveled API
    # -------------------------------------------------------------------------

    def debug(self, *args: Any) -> None:
        self.dispatch(_join(args), DEBUG)

    def debugf(self, fmt: str, *args: Any) -> None:
        self.dispatch(_format(fmt, args), DEBUG)

    def print(self, *args: Any) -> None:
        """Log at info level."""
        self.dispatch(_join(args), INFO)

    def printf(self, fmt: str, *args: Any) -> None:
        self.dispatch(_format(fmt, args), INFO)

    def warn(self, *args: Any) -> None:
        self.dispatch(_join(args), WARNING)

    def warnf(self, fmt: str, *args: Any) -> None:
        self.dispatch(_format(fmt, args), WARNING)

    def error(self, err: Optional[BaseException], *args: Any) -> None:
        """Log at error level, appending ``err`` and a stack trace when given."""
        self.dispatch(enrich(err, _join(args)), ERROR)

    def errorf(self, err: Optional[BaseException], fmt: str, *args: Any) -> None:
        self.dispatch(enrich(err, _format(fmt, args)), ERROR)

    def fatal(self, err: Optional[BaseException], *args: Any) -> None:
        """Log at fatal level, then raise ``FatalLogPanic``."""
        text = _join(args)
        self.dispatch(enrich(err, text), FATAL)
        raise FatalLogPanic(text)

    def fatalf(self, err: Optional[BaseException], fmt: str, *args: Any) -> None:
        text = _format(fmt, args)
        self.dispatch(enrich(err, text), FATAL)
        raise FatalLogPanic(text)

    def get_writer(self, level: Level) -> LogWriter:
        """File-like object that logs everything written to it at ``level``."""
        return LogWriter(self, level)

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def dispatch(self, text: str, level: Level) -> None:
        """Print ``text`` if it passes the console gate, then publish it."""
        message = build_message(text, level, self._settings.service_name, self._hostname)
        with dispatching():
            self._emit(message)

    def _emit(self, message: Message) -> None:
        level = message.level
        if level.severity >= self._min_log_level.severity and self._settings.console:
            self._write_console(render(message), level)

        if not self._publishers:
            return

        try:
            data = message.to_json()
        except SerializationError as exc:
            _diagnostics.error("serialization_failed", error=str(exc), level=level.text)
            return

        for publisher in self._publishers:
            try:
                publisher.publish(data)
            except Exception as exc:
                _diagnostics.warning(
                    "publish_failed",
                    publisher=publisher.name,
                    error=str(exc),
                    message=render(message),
                )

    def _console_stream(self) -> Optional[TextIO]:
        if self._stream is not None:
            return self._stream
        # stdout redirected into one of our own writers
        if isinstance(sys.stdout, LogWriter):
            return sys.__stdout__
        return sys.stdout

    def _write_console(self, line: str, level: Level) -> None:
        stream = self._console_stream()
        if stream is None:
            return
        try:
            stream.write(line if line.endswith("\n") else line + "\n")
            stream.flush()
        except (OSError, ValueError) as exc:
            _diagnostics.error("console_write_failed", error=str(exc), level=level.text)


# =============================================================================
# Construction
# =============================================================================


def create(
    settings: Optional[Settings] = None,
    *,
    publishers: Optional[Iterable[Publisher]] = None,
    hostname: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> Logger:
    """
    Create a logger.

    Args:
        settings: Logger settings; loaded from ``LOG_*`` environment variables if omitted.
        publishers: Explicit publisher list; built from the settings' ``use_*`` flags if omitted.
        hostname: Hostname stamped on messages (defaults to the machine name).
        stream: Console stream (defaults to stdout).
    """
    if settings is None:
        settings = Settings()

    if publishers is None:
        publishers = build_publishers(settings)

    return Logger(settings, publishers, hostname=hostname, stream=stream)
