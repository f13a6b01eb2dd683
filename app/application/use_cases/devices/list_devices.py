"""Use cases for listing registered devices."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import DeviceToken
from app.domain.errors import ValidationError
from app.infrastructure.repositories import DeviceTokenRepository


def list_active_devices(session: Session) -> Sequence[DeviceToken]:
    """Return every active device, most recently used first."""

    return DeviceTokenRepository(session).list_active()


def list_user_devices(session: Session, *, user_id: str) -> Sequence[DeviceToken]:
    """Return the active devices owned by ``user_id``."""

    normalized = (user_id or "").strip()
    if not normalized:
        raise ValidationError("A user id is required")
    return DeviceTokenRepository(session).list_active(user_id=normalized)
