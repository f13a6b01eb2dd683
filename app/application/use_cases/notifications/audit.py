"""Persist an audit record for every dispatch result."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import (
    NOTIFICATION_STATUS_FAILED,
    NOTIFICATION_STATUS_SENT,
    DispatchResult,
    NotificationPayload,
    SentNotification,
    TopicDispatchResult,
)
from app.domain.errors import PushDispatchError
from app.infrastructure.repositories import (
    DeviceTokenRepository,
    SentNotificationRepository,
    TopicRepository,
)
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def _record(
    payload: NotificationPayload,
    *,
    success: bool,
    message_id: str | None,
    error: str | None,
    device_id: int | None = None,
    topic_id: int | None = None,
) -> SentNotification:
    return SentNotification(
        id=None,
        title=payload.title,
        body=payload.body,
        data=dict(payload.data),
        status=NOTIFICATION_STATUS_SENT if success else NOTIFICATION_STATUS_FAILED,
        device_id=device_id,
        topic_id=topic_id,
        message_id=message_id,
        error_message=None if success else error,
        sent_at=now_in_app_timezone(),
    )


class NotificationLogger:
    """Write ``SentNotification`` rows without ever failing the caller.

    Dry runs are not recorded. Persistence errors are logged and dropped.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def log_results(
        self,
        payload: NotificationPayload,
        results: Sequence[DispatchResult],
        *,
        dry_run: bool = False,
    ) -> list[SentNotification]:
        if dry_run or not results:
            return []
        try:
            device_ids = DeviceTokenRepository(self.session).map_ids_by_token(
                result.token for result in results if result.token
            )
            records = [
                _record(
                    payload,
                    success=result.success,
                    message_id=result.message_id,
                    error=result.error,
                    device_id=device_ids.get(result.token) if result.token else None,
                )
                for result in results
            ]
            return SentNotificationRepository(self.session).create_many(records)
        except (PushDispatchError, SQLAlchemyError):
            self.session.rollback()
            logger.exception("Could not record %d dispatch results", len(results))
            return []

    def log_topic_result(
        self,
        payload: NotificationPayload,
        result: TopicDispatchResult,
        *,
        dry_run: bool = False,
    ) -> list[SentNotification]:
        if dry_run:
            return []
        try:
            topic = TopicRepository(self.session).get_by_name(result.topic)
            record = _record(
                payload,
                success=result.success,
                message_id=result.message_id,
                error=result.error,
                topic_id=topic.id if topic else None,
            )
            return SentNotificationRepository(self.session).create_many([record])
        except (PushDispatchError, SQLAlchemyError):
            self.session.rollback()
            logger.exception("Could not record topic dispatch to %s", result.topic)
            return []


__all__ = ["NotificationLogger"]
