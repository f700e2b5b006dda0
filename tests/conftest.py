import io
import logging
from typing import List

import pytest

from uatu.config import Settings
from uatu.logging import Logger, Message
from uatu.publishers import Publisher


class RecordingPublisher(Publisher):
    """Keeps every payload it receives."""

    def __init__(self, calls: List[str] | None = None):
        self.payloads: List[bytes] = []
        self._calls = calls

    def publish(self, data: bytes) -> None:
        self.payloads.append(data)
        if self._calls is not None:
            self._calls.append(self.name)

    @property
    def messages(self) -> List[Message]:
        return [Message.from_json(data) for data in self.payloads]


class FailingPublisher(Publisher):
    """Rejects every payload."""

    def __init__(self, calls: List[str] | None = None):
        self._calls = calls

    def publish(self, data: bytes) -> None:
        if self._calls is not None:
            self._calls.append(self.name)
        raise ConnectionError("collector unreachable")


@pytest.fixture
def console() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def recorder() -> RecordingPublisher:
    return RecordingPublisher()


@pytest.fixture
def settings() -> Settings:
    return Settings(service_name="svc", level="Warning", console=True)


@pytest.fixture
def logger(settings, recorder, console) -> Logger:
    return Logger(settings, [recorder], hostname="h1", stream=console)


@pytest.fixture
def clean_log_env(monkeypatch):
    """Remove LOG_* variables so settings fall back to their defaults."""
    import os

    for key in list(os.environ):
        if key.startswith("LOG_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)
