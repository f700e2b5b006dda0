"""
Publisher Configuration.

Each transport has its own environment prefix so its settings can be loaded
independently of whether it is enabled.
"""

from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class HttpPublisherSettings(BaseSettings):
    """
    HTTP log collector settings.
    Prefix: LOG_REST_
    """

    model_config = SettingsConfigDict(
        env_prefix="LOG_REST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    url: str = Field(default="http://logger:8082/log", description="Collector endpoint")
    token: SecretStr = Field(default=SecretStr("token"), description="Bearer token sent with every request")
    timeout_seconds: float = Field(default=5.0, gt=0, description="Per-request timeout")


class GCloudPublisherSettings(BaseSettings):
    """
    Google Cloud Logging settings.
    Prefix: LOG_GCLOUD_
    """

    model_config = SettingsConfigDict(
        env_prefix="LOG_GCLOUD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    project: Optional[str] = Field(default=None, description="GCP project ID (defaults to the ambient project)")
    log_name: str = Field(default="uatu", description="Cloud Logging log name")
