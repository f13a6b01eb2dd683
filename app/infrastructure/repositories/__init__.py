"""Repository implementations for infrastructure layer."""

from .device_token_repository import DeviceTokenRepository
from .preferences_repository import NotificationPreferencesRepository
from .sent_notification_repository import SentNotificationRepository
from .subscription_repository import SubscriptionRepository
from .topic_repository import TopicRepository

__all__ = [
    "DeviceTokenRepository",
    "NotificationPreferencesRepository",
    "SentNotificationRepository",
    "SubscriptionRepository",
    "TopicRepository",
]
