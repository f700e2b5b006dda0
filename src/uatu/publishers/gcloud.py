"""
Google Cloud Logging publisher.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

import orjson

from ..config.publishers import GCloudPublisherSettings
from ..exceptions import PublisherUnavailableError
from .base import Publisher

if TYPE_CHECKING:
    from google.cloud.logging import Client as GCloudLoggingClient


class GCloudPublisher(Publisher):
    """Writes each message as a structured Cloud Logging entry.

    The client library is imported lazily; when it is missing or the client
    cannot be created the publisher stays unavailable and every ``publish``
    raises ``PublisherUnavailableError``.
    """

    SEVERITY_MAP = {
        "Debug": "DEBUG",
        "Info": "INFO",
        "Warning": "WARNING",
        "Error": "ERROR",
        "Fatal": "CRITICAL",
    }

    def __init__(self, settings: GCloudPublisherSettings, *, client: Optional[Any] = None):
        self._settings = settings
        self._owns_client = client is None
        self._unavailable_reason: Optional[str] = None
        try:
            if client is None:
                from google.cloud import logging as gcloud_logging

                client = gcloud_logging.Client(project=settings.project)
            self._client: GCloudLoggingClient = client
            self._logger = self._client.logger(settings.log_name)
            self._available = True
        except Exception as exc:
            self._available = False
            self._logger = None
            self._unavailable_reason = f"{type(exc).__name__}: {exc}"

    @property
    def available(self) -> bool:
        return self._available

    def publish(self, data: bytes) -> None:
        if not self._available or not self._logger:
            raise PublisherUnavailableError(self.name, self._unavailable_reason or "transport unavailable")
        payload = orjson.loads(data)
        level = payload.get("level", {}).get("text", "Info")
        self._logger.log_struct(payload, severity=self.SEVERITY_MAP.get(level, "DEFAULT"))

    def close(self) -> None:
        if self._available and self._owns_client:
            self._client.close()
