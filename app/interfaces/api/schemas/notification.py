"""Pydantic models describing notification send requests and results."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .device import PlatformName

SendType = Literal["user", "tokens", "topic", "platform", "all"]


class NotificationContent(BaseModel):
    """Notification payload plus the dry-run flag accepted by every send."""

    title: str = Field(..., min_length=1, max_length=255)
    body: str = Field(..., min_length=1)
    data: dict[str, str] = Field(default_factory=dict)
    image_url: str | None = None
    click_action: str | None = None
    dry_run: bool = Field(
        default=False,
        description="Validate the send with the delivery channel without notifying devices",
    )


class UserSendRequest(NotificationContent):
    user_id: str = Field(..., min_length=1)


class TokensSendRequest(NotificationContent):
    tokens: list[str] = Field(..., min_length=1)


class TopicSendRequest(NotificationContent):
    topic: str = Field(..., min_length=1)


class PlatformSendRequest(NotificationContent):
    platform: PlatformName


class BroadcastSendRequest(NotificationContent):
    pass


class NotificationSendRequest(NotificationContent):
    """Unified send request; only the parameter matching ``type`` is read."""

    type: SendType
    user_id: str | None = None
    tokens: list[str] | None = None
    topic: str | None = None
    platform: PlatformName | None = None


class DispatchResultRead(BaseModel):
    success: bool
    token: str | None = None
    message_id: str | None = None
    error: str | None = None

    model_config = ConfigDict(from_attributes=True)


class SendSummaryRead(BaseModel):
    success: bool
    total_sent: int
    total_failed: int
    results: list[DispatchResultRead]


class TopicSendResultRead(BaseModel):
    success: bool
    topic: str
    message_id: str | None = None
    error: str | None = None
    total_sent: int
    total_failed: int


class NotificationStatsRead(BaseModel):
    total: int
    sent: int
    delivered: int
    failed: int
    pending: int
    start_date: datetime | None = None
    end_date: datetime | None = None


__all__ = [
    "BroadcastSendRequest",
    "DispatchResultRead",
    "NotificationContent",
    "NotificationSendRequest",
    "NotificationStatsRead",
    "PlatformSendRequest",
    "SendSummaryRead",
    "SendType",
    "TokensSendRequest",
    "TopicSendRequest",
    "TopicSendResultRead",
    "UserSendRequest",
]
