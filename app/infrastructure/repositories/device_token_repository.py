"""Persistence helpers for device token entities."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import DeviceToken
from app.domain.errors import PersistenceError
from app.infrastructure.models import DeviceTokenModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

from ._persistence import commit_or_raise

_METADATA_FIELDS = ("device_id", "app_version", "os_version", "device_model")


class DeviceTokenRepository:
    """Provide lookup and upsert operations for :class:`DeviceToken` records."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_token(self, token: str) -> DeviceToken | None:
        model = self._get_model_by_token(token)
        return self._to_entity(model) if model else None

    def list_active(
        self,
        *,
        user_id: str | None = None,
        platform: str | None = None,
    ) -> Sequence[DeviceToken]:
        """Return active devices, most recently used first.

        ``user_id`` and ``platform`` narrow the query when provided.
        """

        query = self.session.query(DeviceTokenModel).filter(
            DeviceTokenModel.is_active.is_(True)
        )
        if user_id is not None:
            query = query.filter(DeviceTokenModel.user_id == user_id)
        if platform is not None:
            query = query.filter(DeviceTokenModel.platform == platform)
        query = query.order_by(
            DeviceTokenModel.last_used_at.is_(None),
            DeviceTokenModel.last_used_at.desc(),
            DeviceTokenModel.id.asc(),
        )
        return [self._to_entity(model) for model in query.all()]

    def map_ids_by_token(self, tokens: Iterable[str]) -> dict[str, int]:
        """Return the device id of every registered token in ``tokens``."""

        unique = list(dict.fromkeys(tokens))
        if not unique:
            return {}
        rows = (
            self.session.query(DeviceTokenModel.token, DeviceTokenModel.id)
            .filter(DeviceTokenModel.token.in_(unique))
            .all()
        )
        return {token: device_id for token, device_id in rows}

    def upsert(
        self,
        device: DeviceToken,
        *,
        reference_time: datetime | None = None,
    ) -> tuple[DeviceToken, bool]:
        """Create or refresh the record keyed by ``device.token``.

        Returns the stored entity and ``True`` when a new row was created.
        An existing owner is kept unless ``device.user_id`` is supplied.
        """

        now = ensure_app_naive_datetime(reference_time or now_in_app_timezone())
        model = self._get_model_by_token(device.token)
        if model is not None:
            self._refresh_model(model, device, now)
            commit_or_raise(self.session, "update the device token")
            self.session.refresh(model)
            return self._to_entity(model), False

        model = DeviceTokenModel(
            token=device.token,
            user_id=device.user_id,
            platform=device.platform,
            device_id=device.device_id,
            app_version=device.app_version,
            os_version=device.os_version,
            device_model=device.device_model,
            is_active=True,
            last_used_at=now,
            created_at=now,
        )
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError:
            # Another request registered the same token first.
            self.session.rollback()
            model = self._get_model_by_token(device.token)
            if model is None:
                raise PersistenceError("Could not register the device token")
            self._refresh_model(model, device, now)
            commit_or_raise(self.session, "update the device token")
            self.session.refresh(model)
            return self._to_entity(model), False
        self.session.refresh(model)
        return self._to_entity(model), True

    def deactivate(
        self, token: str, *, reference_time: datetime | None = None
    ) -> DeviceToken | None:
        model = self._get_model_by_token(token)
        if model is None:
            return None
        model.is_active = False
        model.updated_at = ensure_app_naive_datetime(
            reference_time or now_in_app_timezone()
        )
        commit_or_raise(self.session, "deactivate the device token")
        self.session.refresh(model)
        return self._to_entity(model)

    def _get_model_by_token(self, token: str) -> DeviceTokenModel | None:
        return (
            self.session.query(DeviceTokenModel)
            .filter(DeviceTokenModel.token == token)
            .one_or_none()
        )

    @staticmethod
    def _refresh_model(
        model: DeviceTokenModel, device: DeviceToken, now: datetime | None
    ) -> None:
        if device.user_id is not None:
            model.user_id = device.user_id
        model.platform = device.platform
        for field_name in _METADATA_FIELDS:
            value = getattr(device, field_name)
            if value is not None:
                setattr(model, field_name, value)
        model.is_active = True
        model.last_used_at = now
        model.updated_at = now

    @staticmethod
    def _to_entity(model: DeviceTokenModel) -> DeviceToken:
        return DeviceToken(
            id=model.id,
            token=model.token,
            platform=model.platform,
            user_id=model.user_id,
            device_id=model.device_id,
            app_version=model.app_version,
            os_version=model.os_version,
            device_model=model.device_model,
            is_active=bool(model.is_active),
            last_used_at=ensure_app_timezone(model.last_used_at),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["DeviceTokenRepository"]
