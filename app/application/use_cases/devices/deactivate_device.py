"""Use case for deactivating a device push token."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.domain.entities import DeviceToken
from app.domain.errors import NotFoundError
from app.infrastructure.repositories import DeviceTokenRepository, SubscriptionRepository
from app.utils import mask_token, now_in_app_timezone

from .validators import ensure_token

logger = logging.getLogger(__name__)


def deactivate_device(session: Session, *, token: str) -> DeviceToken:
    """Deactivate the device and every topic subscription it holds."""

    normalized = ensure_token(token)
    now = now_in_app_timezone()
    device = DeviceTokenRepository(session).deactivate(normalized, reference_time=now)
    if device is None:
        raise NotFoundError("Device token not found")

    closed = SubscriptionRepository(session).deactivate(
        device_id=device.id, reference_time=now
    )
    logger.info(
        "Deactivated device token %s and %d subscription(s)",
        mask_token(device.token),
        closed,
    )
    return device
