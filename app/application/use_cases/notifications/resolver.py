"""Resolve target selectors into concrete push tokens."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.application.use_cases.devices.validators import ensure_platform
from app.domain.entities import (
    AllDevicesTarget,
    PlatformTarget,
    TargetSelector,
    TokensTarget,
    UserTarget,
)
from app.domain.errors import NotFoundError, ValidationError
from app.infrastructure.repositories import DeviceTokenRepository


def resolve_tokens(session: Session, selector: TargetSelector) -> list[str]:
    """Return the tokens addressed by ``selector``.

    Explicit token lists are passed through unchecked. Every other selector
    only matches active devices and raises ``NotFoundError`` when nothing
    matches.
    """

    if isinstance(selector, TokensTarget):
        return list(selector.tokens)

    repository = DeviceTokenRepository(session)
    if isinstance(selector, UserTarget):
        user_id = (selector.user_id or "").strip()
        if not user_id:
            raise ValidationError("A user id is required")
        devices = repository.list_active(user_id=user_id)
        if not devices:
            raise NotFoundError(f"No active devices found for user {user_id}")
    elif isinstance(selector, PlatformTarget):
        platform = ensure_platform(selector.platform)
        devices = repository.list_active(platform=platform)
        if not devices:
            raise NotFoundError(f"No active devices found for platform {platform}")
    elif isinstance(selector, AllDevicesTarget):
        devices = repository.list_active()
        if not devices:
            raise NotFoundError("No active devices found")
    else:
        raise ValidationError(f"Unsupported target selector: {selector!r}")

    return [device.token for device in devices]


__all__ = ["resolve_tokens"]
