"""Persistence helpers for topics."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import Topic
from app.domain.errors import PersistenceError
from app.infrastructure.models import TopicModel
from app.utils import ensure_app_timezone


class TopicRepository:
    """Provide CRUD operations for :class:`Topic` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_name(self, name: str) -> Topic | None:
        model = self._get_model_by_name(name)
        return self._to_entity(model) if model else None

    def list_active(self) -> Sequence[Topic]:
        query = (
            self.session.query(TopicModel)
            .filter(TopicModel.is_active.is_(True))
            .order_by(TopicModel.name.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def get_or_create(self, name: str, *, description: str | None = None) -> tuple[Topic, bool]:
        """Return the topic called ``name``, creating it when absent."""

        model = self._get_model_by_name(name)
        if model is not None:
            return self._to_entity(model), False

        model = TopicModel(name=name, description=description, is_active=True)
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            model = self._get_model_by_name(name)
            if model is None:
                raise PersistenceError("Could not create the topic")
            return self._to_entity(model), False
        self.session.refresh(model)
        return self._to_entity(model), True

    def _get_model_by_name(self, name: str) -> TopicModel | None:
        return (
            self.session.query(TopicModel)
            .filter(TopicModel.name == name)
            .one_or_none()
        )

    @staticmethod
    def _to_entity(model: TopicModel) -> Topic:
        return Topic(
            id=model.id,
            name=model.name,
            description=model.description,
            is_active=bool(model.is_active),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["TopicRepository"]
