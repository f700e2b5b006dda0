"""
uatu logging engine.

Filters messages by severity, prints a console line and fans out a JSON copy
of every message to the configured publishers.

Library: orjson for the wire format, structlog for the engine's own diagnostics.
"""

from .core import Logger, create
from .diagnostics import get_logger
from .enrich import StackTracer, enrich
from .formatters import render
from .interceptors import UatuHandler, intercept_stdlib_logging
from .io import LogWriter
from .types import DEBUG, ERROR, FATAL, INFO, LEVELS, WARNING, Level, Message, build_message, resolve_level

__all__ = [
    "Logger",
    "create",
    "get_logger",
    "Level",
    "LEVELS",
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "FATAL",
    "resolve_level",
    "Message",
    "build_message",
    "render",
    "enrich",
    "StackTracer",
    "LogWriter",
    "UatuHandler",
    "intercept_stdlib_logging",
]
