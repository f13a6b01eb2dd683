"""Domain entity representing a registered push device."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

PLATFORM_ANDROID = "android"
PLATFORM_IOS = "ios"
PLATFORM_WEB = "web"
PLATFORMS = (PLATFORM_ANDROID, PLATFORM_IOS, PLATFORM_WEB)


@dataclass
class DeviceToken:
    """One installed client instance able to receive push notifications.

    ``token`` is the opaque string issued by the platform push SDK and is
    globally unique. Records are deactivated rather than deleted.
    """

    id: int | None
    token: str
    platform: str
    user_id: str | None = None
    device_id: str | None = None
    app_version: str | None = None
    os_version: str | None = None
    device_model: str | None = None
    is_active: bool = True
    last_used_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "DeviceToken",
    "PLATFORMS",
    "PLATFORM_ANDROID",
    "PLATFORM_IOS",
    "PLATFORM_WEB",
]
