"""Schemas for device registration endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .topic import SubscriptionRead

PlatformName = Literal["android", "ios", "web"]


class DeviceRegisterRequest(BaseModel):
    token: str = Field(..., min_length=1, description="Push token issued by the client SDK")
    platform: PlatformName
    user_id: str | None = Field(default=None, max_length=128)
    device_id: str | None = Field(default=None, max_length=255)
    app_version: str | None = Field(default=None, max_length=50)
    os_version: str | None = Field(default=None, max_length=50)
    device_model: str | None = Field(default=None, max_length=120)


class DeviceDeactivateRequest(BaseModel):
    token: str = Field(..., min_length=1)


class DeviceTokenRead(BaseModel):
    id: int
    token: str
    platform: str
    user_id: str | None
    device_id: str | None
    app_version: str | None
    os_version: str | None
    device_model: str | None
    is_active: bool
    last_used_at: datetime | None
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class DeviceRegisterResponse(BaseModel):
    device: DeviceTokenRead
    created: bool


class DeviceSubscriptionsRead(BaseModel):
    device: DeviceTokenRead
    subscriptions: list[SubscriptionRead]


__all__ = [
    "DeviceDeactivateRequest",
    "DeviceRegisterRequest",
    "DeviceRegisterResponse",
    "DeviceSubscriptionsRead",
    "DeviceTokenRead",
    "PlatformName",
]
