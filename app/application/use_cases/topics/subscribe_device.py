"""Use case for subscribing a device to a topic."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.application.use_cases.devices.validators import ensure_token
from app.domain.entities import AUTO_CREATED_TOPIC_DESCRIPTION, Subscription, Topic
from app.domain.errors import NotFoundError
from app.infrastructure.repositories import (
    DeviceTokenRepository,
    SubscriptionRepository,
    TopicRepository,
)
from app.utils import mask_token

from .validators import ensure_topic_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TopicSubscription:
    subscription: Subscription
    topic: Topic
    topic_created: bool


def subscribe_device(session: Session, *, token: str, topic_name: str) -> TopicSubscription:
    """Subscribe the device to ``topic_name``, creating the topic if needed.

    Subscribing twice keeps a single active row; a previously cancelled
    subscription is reactivated in place.
    """

    normalized_token = ensure_token(token)
    name = ensure_topic_name(topic_name)

    device = DeviceTokenRepository(session).get_by_token(normalized_token)
    if device is None:
        raise NotFoundError("Device token not found. Please register your device first.")

    topic, created = TopicRepository(session).get_or_create(
        name, description=AUTO_CREATED_TOPIC_DESCRIPTION.format(name=name)
    )
    if created:
        logger.info("Auto-created topic %s", name)

    subscription = SubscriptionRepository(session).activate(
        device_id=device.id, topic_id=topic.id
    )
    logger.info("Device %s subscribed to topic %s", mask_token(device.token), name)
    return TopicSubscription(subscription=subscription, topic=topic, topic_created=created)
