"""
Bridge from the standard library ``logging`` module into a uatu logger.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from .diagnostics import in_dispatch
from .enrich import enrich
from .types import DEBUG, ERROR, FATAL, INFO, WARNING, Level

if TYPE_CHECKING:
    from .core import Logger


def level_for_record(levelno: int) -> Level:
    """Map a stdlib level number onto the closest uatu level."""
    if levelno < logging.INFO:
        return DEBUG
    if levelno < logging.WARNING:
        return INFO
    if levelno < logging.ERROR:
        return WARNING
    if levelno < logging.CRITICAL:
        return ERROR
    return FATAL


class UatuHandler(logging.Handler):
    """
    Forward stdlib log records to a uatu logger.

    Records go straight to ``Logger.dispatch``: a CRITICAL record is logged at
    fatal level but never raises ``FatalLogPanic``. Exceptions attached to a
    record are folded in the same way ``Logger.error`` does. Records emitted
    while a dispatch is running on this thread (a publisher's HTTP client
    logging its own requests, say) are ignored.
    """

    def __init__(self, logger: Logger, level: int = logging.NOTSET):
        super().__init__(level)
        self.logger = logger

    def emit(self, record: logging.LogRecord) -> None:
        if in_dispatch():
            return
        try:
            text = record.getMessage()
            if record.exc_info and record.exc_info[1] is not None:
                text = enrich(record.exc_info[1], text)
            self.logger.dispatch(text, level_for_record(record.levelno))
        except Exception:
            self.handleError(record)


def intercept_stdlib_logging(
    logger: Logger,
    *,
    level: int = logging.DEBUG,
    names: Iterable[str] = (),
) -> UatuHandler:
    """Route the root logger (and the named loggers) into ``logger``."""
    handler = UatuHandler(logger)

    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    # Named loggers may have been configured with their own handlers already
    for name in names:
        lg = logging.getLogger(name)
        lg.handlers = []
        lg.propagate = True

    return handler
