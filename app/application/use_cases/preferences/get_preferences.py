"""Use case for reading a user's notification preferences."""

from sqlalchemy.orm import Session

from app.domain.entities import NotificationPreferences
from app.domain.errors import ValidationError
from app.infrastructure.repositories import NotificationPreferencesRepository


def ensure_user_id(user_id: str | None) -> str:
    normalized = (user_id or "").strip()
    if not normalized:
        raise ValidationError("A user id is required")
    return normalized


def get_preferences(session: Session, *, user_id: str) -> NotificationPreferences:
    """Return the user's preferences, creating the defaults on first access."""

    normalized = ensure_user_id(user_id)
    repository = NotificationPreferencesRepository(session)
    preferences = repository.get_by_user(normalized)
    if preferences is not None:
        return preferences
    created, _ = repository.upsert(normalized, {})
    return created
