"""Domain entity describing per-user notification preferences."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class NotificationPreferences:
    id: int | None
    user_id: str
    push_enabled: bool = True
    marketing_enabled: bool = True
    news_enabled: bool = True
    reminder_enabled: bool = True
    quiet_hours_start: str | None = None
    quiet_hours_end: str | None = None
    timezone: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["NotificationPreferences"]
