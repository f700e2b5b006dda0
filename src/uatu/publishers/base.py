"""
Publisher abstraction: the only thing the logging engine needs from a remote sink.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

# =============================================================================
# Publisher Abstraction (Strategy Pattern)
# =============================================================================


class Publisher(ABC):
    """Abstract base class for remote log sinks.

    Implementations own their transport (connections, retries, timeouts).
    The logger only calls ``publish`` and never closes a publisher.
    """

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def publish(self, data: bytes) -> None:
        """Deliver one serialized message. Raise on failure."""
        ...

    def close(self) -> None:
        """Release transport resources."""
