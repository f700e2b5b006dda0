"""
uatu Configuration Module.

Settings are plain pydantic-settings objects handed to a logger at
construction; there is no shared module-level instance.

Usage:
    from uatu.config import Settings

    settings = Settings()  # LOG_* environment variables and .env
    settings = Settings(service_name="billing", level="Warning")

Environment variables:
    LOG_SERVICE_NAME, LOG_LEVEL, LOG_CONSOLE, LOG_USE_REST, LOG_USE_GCLOUD
    LOG_REST_URL, LOG_REST_TOKEN, LOG_REST_TIMEOUT_SECONDS
    LOG_GCLOUD_PROJECT, LOG_GCLOUD_LOG_NAME
"""

from .logging import Settings
from .publishers import GCloudPublisherSettings, HttpPublisherSettings

__all__ = [
    "Settings",
    "HttpPublisherSettings",
    "GCloudPublisherSettings",
]
