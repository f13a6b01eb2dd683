"""Use case for reading the topics a device is subscribed to."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.domain.entities import DeviceToken, Subscription
from app.domain.errors import NotFoundError
from app.infrastructure.repositories import DeviceTokenRepository, SubscriptionRepository

from .validators import ensure_token


@dataclass(frozen=True)
class DeviceSubscriptions:
    device: DeviceToken
    subscriptions: Sequence[Subscription]


def get_device_subscriptions(session: Session, *, token: str) -> DeviceSubscriptions:
    """Return the device identified by ``token`` with its active subscriptions."""

    device = DeviceTokenRepository(session).get_by_token(ensure_token(token))
    if device is None:
        raise NotFoundError("Device token not found")
    subscriptions = SubscriptionRepository(session).list_active_for_device(device.id)
    return DeviceSubscriptions(device=device, subscriptions=subscriptions)
