"""Application configuration settings."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

DELIVERY_CHANNEL_FIREBASE = "firebase"
DELIVERY_CHANNEL_FAKE = "fake"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding=ENV_FILE_ENCODING,
        extra="ignore",
    )

    database_url: str = Field(
        default="sqlite:///./pushdispatch.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used to store and present timestamps",
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    cors_origins: list[str] = Field(
        default_factory=list,
        description="Origins allowed to call the API from a browser",
    )
    delivery_channel: str = Field(
        default=DELIVERY_CHANNEL_FIREBASE,
        description="Push delivery backend: 'firebase' or 'fake' for local development",
    )
    firebase_service_account_key: str | None = Field(
        default=None,
        description="Firebase service account JSON document",
    )
    firebase_credentials_path: str | None = Field(
        default=None,
        description="Path to a Firebase service account JSON file",
    )
    firebase_project_id: str | None = Field(
        default=None,
        description="Overrides the project id declared by the service account",
    )
    notification_sound: str = Field(default="default")
    apns_badge: int = Field(default=1, ge=0)
    webpush_icon: str = Field(default="/icon-192x192.png")
    webpush_badge: str = Field(default="/badge-72x72.png")

    @model_validator(mode="after")
    def _validate_delivery_channel(self) -> "Settings":
        channel = self.delivery_channel.strip().lower()
        if channel not in (DELIVERY_CHANNEL_FIREBASE, DELIVERY_CHANNEL_FAKE):
            raise ValueError("DELIVERY_CHANNEL must be either 'firebase' or 'fake'")
        self.delivery_channel = channel
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the service and its scripts."""

    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


__all__ = [
    "DELIVERY_CHANNEL_FAKE",
    "DELIVERY_CHANNEL_FIREBASE",
    "Settings",
    "configure_logging",
    "get_settings",
    "reset_settings_cache",
]
