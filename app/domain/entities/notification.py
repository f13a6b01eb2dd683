"""Domain entities describing notification payloads and dispatch outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

NOTIFICATION_STATUS_SENT = "sent"
NOTIFICATION_STATUS_DELIVERED = "delivered"
NOTIFICATION_STATUS_FAILED = "failed"
NOTIFICATION_STATUS_PENDING = "pending"
NOTIFICATION_STATUSES = (
    NOTIFICATION_STATUS_SENT,
    NOTIFICATION_STATUS_DELIVERED,
    NOTIFICATION_STATUS_FAILED,
    NOTIFICATION_STATUS_PENDING,
)

UNKNOWN_DELIVERY_ERROR = "Unknown error"


@dataclass(frozen=True)
class NotificationPayload:
    """Content of a push notification.

    ``title`` and ``body`` are required; ``data`` values are always strings
    because FCM only carries string maps.
    """

    title: str
    body: str
    data: dict[str, str] = field(default_factory=dict)
    image_url: str | None = None
    click_action: str | None = None


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of one token inside a multicast send.

    Exactly one of ``message_id`` and ``error`` is set, matching ``success``.
    """

    success: bool
    token: str | None
    message_id: str | None = None
    error: str | None = None

    @classmethod
    def delivered(cls, token: str | None, message_id: str) -> "DispatchResult":
        return cls(success=True, token=token, message_id=message_id)

    @classmethod
    def failed(cls, token: str | None, error: str | None) -> "DispatchResult":
        return cls(success=False, token=token, error=error or UNKNOWN_DELIVERY_ERROR)


@dataclass(frozen=True)
class TopicDispatchResult:
    """Aggregate outcome of a send addressed to a topic."""

    success: bool
    topic: str
    message_id: str | None = None
    error: str | None = None

    @property
    def total_sent(self) -> int:
        return 1 if self.success else 0

    @property
    def total_failed(self) -> int:
        return 0 if self.success else 1


@dataclass(frozen=True)
class SendSummary:
    """Ledger returned by every multicast send operation."""

    results: tuple[DispatchResult, ...]
    success: bool = True

    @property
    def total_sent(self) -> int:
        return sum(1 for result in self.results if result.success)

    @property
    def total_failed(self) -> int:
        return sum(1 for result in self.results if not result.success)


@dataclass
class SentNotification:
    """Audit record persisted for each dispatch result."""

    id: int | None
    title: str
    body: str
    status: str
    device_id: int | None = None
    topic_id: int | None = None
    data: dict[str, Any] = field(default_factory=dict)
    message_id: str | None = None
    error_message: str | None = None
    sent_at: datetime | None = None
    delivered_at: datetime | None = None


@dataclass(frozen=True)
class NotificationStats:
    total: int
    sent: int
    delivered: int
    failed: int
    pending: int


__all__ = [
    "DispatchResult",
    "NOTIFICATION_STATUSES",
    "NOTIFICATION_STATUS_DELIVERED",
    "NOTIFICATION_STATUS_FAILED",
    "NOTIFICATION_STATUS_PENDING",
    "NOTIFICATION_STATUS_SENT",
    "NotificationPayload",
    "NotificationStats",
    "SendSummary",
    "SentNotification",
    "TopicDispatchResult",
    "UNKNOWN_DELIVERY_ERROR",
]
