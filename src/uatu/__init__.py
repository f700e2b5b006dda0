"""
uatu: structured logging facade with console output and remote publishers.

Usage:
    import uatu

    log = uatu.create()
    log.warn("disk low")
    log.error(exc, "request failed")
"""

from .config import Settings
from .exceptions import FatalLogPanic, PublishError, PublisherUnavailableError, SerializationError, UatuError
from .logging import (
    DEBUG,
    ERROR,
    FATAL,
    INFO,
    WARNING,
    Level,
    LogWriter,
    Logger,
    Message,
    create,
    resolve_level,
)
from .publishers import Publisher

__all__ = [
    "Settings",
    "Logger",
    "create",
    "Level",
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "FATAL",
    "resolve_level",
    "Message",
    "LogWriter",
    "Publisher",
    "UatuError",
    "SerializationError",
    "PublishError",
    "PublisherUnavailableError",
    "FatalLogPanic",
]
