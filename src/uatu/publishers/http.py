"""
HTTP publisher: POSTs each serialized message to a log collector.
"""

from __future__ import annotations

from typing import Optional

import httpx

from ..config.publishers import HttpPublisherSettings
from ..exceptions import PublishError
from .base import Publisher


class HttpPublisher(Publisher):
    """Sends messages as JSON request bodies over a shared ``httpx.Client``.

    Args:
        settings: Collector URL, token and timeout.
        client: Pre-built client (tests inject one backed by ``httpx.MockTransport``).
    """

    def __init__(self, settings: HttpPublisherSettings, *, client: Optional[httpx.Client] = None):
        self._settings = settings
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=settings.timeout_seconds)

    @property
    def url(self) -> str:
        return self._settings.url

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._settings.token.get_secret_value()}",
        }

    def publish(self, data: bytes) -> None:
        try:
            response = self._client.post(self._settings.url, content=data, headers=self._headers())
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise PublishError(self.name, f"HTTP {exc.response.status_code} from {self._settings.url}") from exc
        except httpx.HTTPError as exc:
            raise PublishError(self.name, f"{type(exc).__name__}: {exc}") from exc

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
