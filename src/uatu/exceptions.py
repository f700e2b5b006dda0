"""
Unified exception hierarchy for uatu.

Failures inside the logging engine never reach the code being instrumented:
serialization and publisher errors are reported through the diagnostics
logger and dropped. The only exception that escapes a log call is
``FatalLogPanic``, raised on purpose by ``Logger.fatal``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class UatuError(Exception):
    """Root of all recoverable uatu errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class SerializationError(UatuError):
    """A message could not be encoded to the wire format."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            f"Unable to serialize log message: {reason}",
            code="SERIALIZATION_FAILED",
            details={"reason": reason},
        )


class PublishError(UatuError):
    """A publisher failed to deliver a serialized message."""

    def __init__(self, publisher: str, reason: str, *, code: str = "PUBLISH_FAILED") -> None:
        super().__init__(
            f"Publisher '{publisher}' failed: {reason}",
            code=code,
            details={"publisher": publisher, "reason": reason},
        )
        self.publisher = publisher


class PublisherUnavailableError(PublishError):
    """The transport behind a publisher could not be initialized."""

    def __init__(self, publisher: str, reason: str = "transport unavailable") -> None:
        super().__init__(publisher, reason, code="PUBLISHER_UNAVAILABLE")


class FatalLogPanic(BaseException):
    """Raised after a fatal message has been dispatched.

    Derives from ``BaseException`` so that ``except Exception`` blocks in
    application code do not swallow it; left unhandled it terminates the
    process like any uncaught exception.
    """
