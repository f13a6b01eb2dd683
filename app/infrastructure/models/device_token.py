"""SQLAlchemy model for registered push devices."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class DeviceTokenModel(Base):
    """Database representation of a device push token."""

    __tablename__ = "device_token"

    id = Column(Integer, primary_key=True, index=True)
    token = Column(String(512), nullable=False, unique=True, index=True)
    user_id = Column(String(128), nullable=True, index=True)
    device_id = Column(String(255), nullable=True)
    platform = Column(String(16), nullable=False, index=True)
    app_version = Column(String(50), nullable=True)
    os_version = Column(String(50), nullable=True)
    device_model = Column(String(120), nullable=True)
    is_active = Column(
        Boolean,
        nullable=False,
        default=True,
        server_default=expression.true(),
        index=True,
    )
    last_used_at = Column(DateTime(), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime(), nullable=True, onupdate=now_in_app_naive_datetime)

    subscriptions = relationship(
        "SubscriptionModel",
        back_populates="device",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


__all__ = ["DeviceTokenModel"]
