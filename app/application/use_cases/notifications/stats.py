"""Aggregate sent notification records by status."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import (
    NOTIFICATION_STATUS_DELIVERED,
    NOTIFICATION_STATUS_FAILED,
    NOTIFICATION_STATUS_PENDING,
    NOTIFICATION_STATUS_SENT,
    NotificationStats,
)
from app.domain.errors import ValidationError
from app.infrastructure.repositories import SentNotificationRepository
from app.utils import ensure_app_timezone


def get_notification_stats(
    session: Session,
    *,
    start: datetime | None = None,
    end: datetime | None = None,
) -> NotificationStats:
    """Count records per status within the inclusive ``[start, end]`` range."""

    start = ensure_app_timezone(start)
    end = ensure_app_timezone(end)
    if start is not None and end is not None and start > end:
        raise ValidationError("The start date must not be after the end date")

    counts = SentNotificationRepository(session).count_by_status(sent_from=start, sent_to=end)
    return NotificationStats(
        total=sum(counts.values()),
        sent=counts.get(NOTIFICATION_STATUS_SENT, 0),
        delivered=counts.get(NOTIFICATION_STATUS_DELIVERED, 0),
        failed=counts.get(NOTIFICATION_STATUS_FAILED, 0),
        pending=counts.get(NOTIFICATION_STATUS_PENDING, 0),
    )


__all__ = ["get_notification_stats"]
