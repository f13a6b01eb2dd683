"""SQLAlchemy model for per-user notification preferences."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.sql import expression

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class NotificationPreferencesModel(Base):
    """Database representation of a user's notification preferences."""

    __tablename__ = "notification_preferences"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(128), nullable=False, unique=True, index=True)
    push_enabled = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    marketing_enabled = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    news_enabled = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    reminder_enabled = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    quiet_hours_start = Column(String(5), nullable=True)
    quiet_hours_end = Column(String(5), nullable=True)
    timezone = Column(String(64), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime(), nullable=True, onupdate=now_in_app_naive_datetime)


__all__ = ["NotificationPreferencesModel"]
