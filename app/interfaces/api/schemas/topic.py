"""Schemas for topics and subscriptions."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TopicRead(BaseModel):
    id: int
    name: str
    description: str | None
    is_active: bool
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class SubscriptionRead(BaseModel):
    id: int
    device_id: int
    topic_id: int
    is_active: bool
    created_at: datetime | None
    updated_at: datetime | None
    topic: TopicRead | None = None

    model_config = ConfigDict(from_attributes=True)


class TopicSubscriptionRequest(BaseModel):
    """Payload shared by the subscribe and unsubscribe endpoints."""

    token: str = Field(..., min_length=1)
    topic: str = Field(..., min_length=1, max_length=255)


class TopicSubscribeResponse(BaseModel):
    subscription: SubscriptionRead
    topic_created: bool


class TopicUnsubscribeResponse(BaseModel):
    updated_count: int


__all__ = [
    "SubscriptionRead",
    "TopicRead",
    "TopicSubscribeResponse",
    "TopicSubscriptionRequest",
    "TopicUnsubscribeResponse",
]
