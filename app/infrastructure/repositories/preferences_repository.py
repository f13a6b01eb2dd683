"""Persistence helpers for notification preferences."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import NotificationPreferences
from app.infrastructure.models import NotificationPreferencesModel
from app.utils import ensure_app_timezone

from ._persistence import commit_or_raise

_UPDATABLE_FIELDS = (
    "push_enabled",
    "marketing_enabled",
    "news_enabled",
    "reminder_enabled",
    "quiet_hours_start",
    "quiet_hours_end",
    "timezone",
)


class NotificationPreferencesRepository:
    """Provide get-or-create and upsert operations keyed by ``user_id``."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_user(self, user_id: str) -> NotificationPreferences | None:
        model = self._get_model(user_id)
        return self._to_entity(model) if model else None

    def upsert(
        self, user_id: str, changes: Mapping[str, Any]
    ) -> tuple[NotificationPreferences, bool]:
        """Apply ``changes`` to the user's preferences, creating them if needed.

        Keys outside the known preference fields are ignored.
        """

        model = self._get_model(user_id)
        created = model is None
        if model is None:
            model = NotificationPreferencesModel(user_id=user_id)
            self.session.add(model)
        for field_name in _UPDATABLE_FIELDS:
            if field_name in changes:
                setattr(model, field_name, changes[field_name])
        if not created:
            commit_or_raise(self.session, "update notification preferences")
            self.session.refresh(model)
            return self._to_entity(model), False

        try:
            self.session.commit()
        except IntegrityError:
            # Created concurrently by another request; apply changes on top.
            self.session.rollback()
            return self.upsert(user_id, changes)[0], False
        self.session.refresh(model)
        return self._to_entity(model), created

    def _get_model(self, user_id: str) -> NotificationPreferencesModel | None:
        return (
            self.session.query(NotificationPreferencesModel)
            .filter(NotificationPreferencesModel.user_id == user_id)
            .one_or_none()
        )

    @staticmethod
    def _to_entity(model: NotificationPreferencesModel) -> NotificationPreferences:
        return NotificationPreferences(
            id=model.id,
            user_id=model.user_id,
            push_enabled=bool(model.push_enabled),
            marketing_enabled=bool(model.marketing_enabled),
            news_enabled=bool(model.news_enabled),
            reminder_enabled=bool(model.reminder_enabled),
            quiet_hours_start=model.quiet_hours_start,
            quiet_hours_end=model.quiet_hours_end,
            timezone=model.timezone,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["NotificationPreferencesRepository"]
