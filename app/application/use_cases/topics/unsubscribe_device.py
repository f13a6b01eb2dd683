"""Use case for unsubscribing a device from a topic."""

from sqlalchemy.orm import Session

from app.application.use_cases.devices.validators import ensure_token
from app.domain.errors import NotFoundError
from app.infrastructure.repositories import (
    DeviceTokenRepository,
    SubscriptionRepository,
    TopicRepository,
)

from .validators import ensure_topic_name


def unsubscribe_device(session: Session, *, token: str, topic_name: str) -> int:
    """Deactivate the subscription and return the number of rows changed."""

    normalized_token = ensure_token(token)
    name = ensure_topic_name(topic_name)

    device = DeviceTokenRepository(session).get_by_token(normalized_token)
    if device is None:
        raise NotFoundError("Device token not found")

    topic = TopicRepository(session).get_by_name(name)
    if topic is None:
        raise NotFoundError("Topic not found")

    return SubscriptionRepository(session).deactivate(
        device_id=device.id, topic_id=topic.id
    )
