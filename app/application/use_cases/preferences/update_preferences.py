"""Use case for updating a user's notification preferences."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from sqlalchemy.orm import Session

from app.domain.entities import NotificationPreferences
from app.domain.errors import ValidationError
from app.infrastructure.repositories import NotificationPreferencesRepository

from .get_preferences import ensure_user_id

_QUIET_HOURS_PATTERN = re.compile(r"^(?:[01]\d|2[0-3]):[0-5]\d$")
_FLAG_FIELDS = ("push_enabled", "marketing_enabled", "news_enabled", "reminder_enabled")
_QUIET_HOURS_FIELDS = ("quiet_hours_start", "quiet_hours_end")


def _ensure_quiet_hours(field_name: str, value: Any) -> str | None:
    if value is None:
        return None
    normalized = str(value).strip()
    if not normalized:
        return None
    if not _QUIET_HOURS_PATTERN.match(normalized):
        raise ValidationError(f"{field_name} must use the HH:MM format")
    return normalized


def _ensure_timezone(value: Any) -> str | None:
    if value is None:
        return None
    normalized = str(value).strip()
    if not normalized:
        return None
    try:
        ZoneInfo(normalized)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValidationError(f"Unknown timezone '{normalized}'") from exc
    return normalized


def update_preferences(
    session: Session,
    *,
    user_id: str,
    changes: Mapping[str, Any],
) -> NotificationPreferences:
    """Upsert the user's preferences, overwriting only the supplied fields."""

    normalized_user = ensure_user_id(user_id)
    cleaned: dict[str, Any] = {}
    for field_name in _FLAG_FIELDS:
        if field_name in changes and changes[field_name] is not None:
            cleaned[field_name] = bool(changes[field_name])
    for field_name in _QUIET_HOURS_FIELDS:
        if field_name in changes:
            cleaned[field_name] = _ensure_quiet_hours(field_name, changes[field_name])
    if "timezone" in changes:
        cleaned["timezone"] = _ensure_timezone(changes["timezone"])

    preferences, _ = NotificationPreferencesRepository(session).upsert(normalized_user, cleaned)
    return preferences
