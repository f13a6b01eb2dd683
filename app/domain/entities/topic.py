"""Domain entities for broadcast topics and device subscriptions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

AUTO_CREATED_TOPIC_DESCRIPTION = "Auto-created topic: {name}"


@dataclass
class Topic:
    """Named broadcast channel devices can subscribe to."""

    id: int | None
    name: str
    description: str | None = None
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Subscription:
    """Link between a device and a topic, toggled instead of deleted."""

    id: int | None
    device_id: int
    topic_id: int
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None
    topic: Topic | None = None


__all__ = ["AUTO_CREATED_TOPIC_DESCRIPTION", "Subscription", "Topic"]
