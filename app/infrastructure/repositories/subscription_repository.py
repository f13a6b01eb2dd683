"""Persistence helpers for device topic subscriptions."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import Subscription, Topic
from app.domain.errors import PersistenceError
from app.infrastructure.models import SubscriptionModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

from ._persistence import commit_or_raise


class SubscriptionRepository:
    """Upsert and toggle subscriptions keyed by ``(device_id, topic_id)``."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_active_for_device(self, device_id: int) -> Sequence[Subscription]:
        query = (
            self.session.query(SubscriptionModel)
            .filter(
                SubscriptionModel.device_id == device_id,
                SubscriptionModel.is_active.is_(True),
            )
            .order_by(SubscriptionModel.created_at.asc(), SubscriptionModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def activate(
        self,
        *,
        device_id: int,
        topic_id: int,
        reference_time: datetime | None = None,
    ) -> Subscription:
        """Create the subscription or reactivate the existing row."""

        now = ensure_app_naive_datetime(reference_time or now_in_app_timezone())
        model = self._get_model(device_id=device_id, topic_id=topic_id)
        if model is None:
            model = SubscriptionModel(
                device_id=device_id,
                topic_id=topic_id,
                is_active=True,
                created_at=now,
            )
            self.session.add(model)
            try:
                self.session.commit()
            except IntegrityError:
                self.session.rollback()
                model = self._get_model(device_id=device_id, topic_id=topic_id)
                if model is None:
                    raise PersistenceError("Could not create the subscription")
            else:
                self.session.refresh(model)
                return self._to_entity(model)

        model.is_active = True
        model.updated_at = now
        commit_or_raise(self.session, "activate the subscription")
        self.session.refresh(model)
        return self._to_entity(model)

    def deactivate(
        self,
        *,
        device_id: int,
        topic_id: int | None = None,
        reference_time: datetime | None = None,
    ) -> int:
        """Deactivate matching subscriptions and return how many rows changed.

        Omitting ``topic_id`` deactivates every subscription of the device.
        """

        query = self.session.query(SubscriptionModel).filter(
            SubscriptionModel.device_id == device_id,
            SubscriptionModel.is_active.is_(True),
        )
        if topic_id is not None:
            query = query.filter(SubscriptionModel.topic_id == topic_id)
        updated = query.update(
            {
                SubscriptionModel.is_active: False,
                SubscriptionModel.updated_at: ensure_app_naive_datetime(
                    reference_time or now_in_app_timezone()
                ),
            },
            synchronize_session=False,
        )
        commit_or_raise(self.session, "deactivate subscriptions")
        return int(updated or 0)

    def _get_model(self, *, device_id: int, topic_id: int) -> SubscriptionModel | None:
        return (
            self.session.query(SubscriptionModel)
            .filter(
                SubscriptionModel.device_id == device_id,
                SubscriptionModel.topic_id == topic_id,
            )
            .one_or_none()
        )

    @staticmethod
    def _to_entity(model: SubscriptionModel) -> Subscription:
        topic = None
        if model.topic is not None:
            topic = Topic(
                id=model.topic.id,
                name=model.topic.name,
                description=model.topic.description,
                is_active=bool(model.topic.is_active),
                created_at=ensure_app_timezone(model.topic.created_at),
                updated_at=ensure_app_timezone(model.topic.updated_at),
            )
        return Subscription(
            id=model.id,
            device_id=model.device_id,
            topic_id=model.topic_id,
            is_active=bool(model.is_active),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            topic=topic,
        )


__all__ = ["SubscriptionRepository"]
