"""
The engine's own failure reporting, and the per-thread dispatch guard.

Anything that fires while a message is being dispatched (console writes that
land back in a ``LogWriter``, stdlib records emitted by a publisher's HTTP
client) must not start another dispatch, or one log call never ends.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator

import structlog

_state = threading.local()


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get the structlog logger the engine reports its own failures to."""
    return structlog.get_logger().bind(logger=name or "uatu")


@contextmanager
def dispatching() -> Iterator[None]:
    """Mark the current thread as inside ``Logger.dispatch``."""
    depth = getattr(_state, "depth", 0)
    _state.depth = depth + 1
    try:
        yield
    finally:
        _state.depth = depth


def in_dispatch() -> bool:
    return getattr(_state, "depth", 0) > 0
