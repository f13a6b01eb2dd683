"""Persistence helpers for the sent notification audit trail."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.domain.entities import SentNotification
from app.infrastructure.models import SentNotificationModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

from ._persistence import commit_or_raise


class SentNotificationRepository:
    """Append audit records and aggregate them by status."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create_many(self, records: Sequence[SentNotification]) -> list[SentNotification]:
        """Insert ``records`` in a single commit."""

        if not records:
            return []
        models = []
        for record in records:
            model = SentNotificationModel()
            self._apply_entity_to_model(model, record)
            self.session.add(model)
            models.append(model)
        commit_or_raise(self.session, "store sent notifications")
        for model in models:
            self.session.refresh(model)
        return [self._to_entity(model) for model in models]

    def count_by_status(
        self,
        *,
        sent_from: datetime | None = None,
        sent_to: datetime | None = None,
    ) -> dict[str, int]:
        """Return record counts keyed by status within an inclusive range."""

        query = self.session.query(
            SentNotificationModel.status, func.count(SentNotificationModel.id)
        )
        query = self._filter_by_range(query, sent_from, sent_to)
        rows = query.group_by(SentNotificationModel.status).all()
        return {status: int(count) for status, count in rows}

    @staticmethod
    def _filter_by_range(query, sent_from: datetime | None, sent_to: datetime | None):
        if sent_from is not None:
            query = query.filter(
                SentNotificationModel.sent_at >= ensure_app_naive_datetime(sent_from)
            )
        if sent_to is not None:
            query = query.filter(
                SentNotificationModel.sent_at <= ensure_app_naive_datetime(sent_to)
            )
        return query

    @staticmethod
    def _apply_entity_to_model(
        model: SentNotificationModel, record: SentNotification
    ) -> None:
        model.device_id = record.device_id
        model.topic_id = record.topic_id
        model.title = record.title
        model.body = record.body
        model.data = dict(record.data or {})
        model.message_id = record.message_id
        model.status = record.status
        model.error_message = record.error_message
        model.sent_at = ensure_app_naive_datetime(
            record.sent_at or now_in_app_timezone()
        )
        model.delivered_at = ensure_app_naive_datetime(record.delivered_at)

    @staticmethod
    def _to_entity(model: SentNotificationModel) -> SentNotification:
        return SentNotification(
            id=model.id,
            device_id=model.device_id,
            topic_id=model.topic_id,
            title=model.title,
            body=model.body,
            data=model.data or {},
            message_id=model.message_id,
            status=model.status,
            error_message=model.error_message,
            sent_at=ensure_app_timezone(model.sent_at),
            delivered_at=ensure_app_timezone(model.delivered_at),
        )


__all__ = ["SentNotificationRepository"]
