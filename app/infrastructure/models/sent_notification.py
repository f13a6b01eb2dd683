"""SQLAlchemy model for the notification audit trail."""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class SentNotificationModel(Base):
    """Append-only record of one dispatch result."""

    __tablename__ = "sent_notification"

    id = Column(Integer, primary_key=True, index=True)
    device_id = Column(
        Integer,
        ForeignKey("device_token.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    topic_id = Column(
        Integer,
        ForeignKey("topic.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    title = Column(String(255), nullable=False)
    body = Column(Text, nullable=False)
    data = Column(JSON, nullable=False, default=dict)
    message_id = Column(String(255), nullable=True)
    status = Column(String(20), nullable=False, index=True)
    error_message = Column(Text, nullable=True)
    sent_at = Column(
        DateTime(), nullable=False, default=now_in_app_naive_datetime, index=True
    )
    delivered_at = Column(DateTime(), nullable=True)


__all__ = ["SentNotificationModel"]
