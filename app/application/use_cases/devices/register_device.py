"""Use case for registering a device push token."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.domain.entities import DeviceToken
from app.infrastructure.repositories import DeviceTokenRepository
from app.utils import mask_token

from .validators import ensure_platform, ensure_token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeviceRegistration:
    device: DeviceToken
    created: bool


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def register_device(
    session: Session,
    *,
    token: str,
    platform: str,
    user_id: str | None = None,
    device_id: str | None = None,
    app_version: str | None = None,
    os_version: str | None = None,
    device_model: str | None = None,
) -> DeviceRegistration:
    """Register ``token`` or refresh the existing record for it.

    Re-registering reactivates the device and overwrites the metadata that
    was supplied; the owner only changes when ``user_id`` is given.
    """

    device = DeviceToken(
        id=None,
        token=ensure_token(token),
        platform=ensure_platform(platform),
        user_id=_clean(user_id),
        device_id=_clean(device_id),
        app_version=_clean(app_version),
        os_version=_clean(os_version),
        device_model=_clean(device_model),
    )
    stored, created = DeviceTokenRepository(session).upsert(device)
    logger.info(
        "%s device token %s (platform=%s)",
        "Registered" if created else "Refreshed",
        mask_token(stored.token),
        stored.platform,
    )
    return DeviceRegistration(device=stored, created=created)
