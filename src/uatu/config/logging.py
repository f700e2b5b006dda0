"""
Logger Configuration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .publishers import GCloudPublisherSettings, HttpPublisherSettings


class Settings(BaseSettings):
    """
    Settings for one logger instance.
    Prefix: LOG_

    Publisher sub-settings load from their own prefixes (``LOG_REST_``,
    ``LOG_GCLOUD_``) and are only used when the matching ``use_*`` flag is set.
    """

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    service_name: str = Field(default="", description="Service name stamped on every message")
    level: str = Field(default="Info", description="Minimum level printed to the console")
    console: bool = Field(default=True, description="Print messages to stdout")
    use_rest: bool = Field(default=False, description="Publish messages over HTTP")
    use_gcloud: bool = Field(default=False, description="Publish messages to Google Cloud Logging")

    rest: HttpPublisherSettings = Field(default_factory=HttpPublisherSettings)
    gcloud: GCloudPublisherSettings = Field(default_factory=GCloudPublisherSettings)
