"""ORM models used by the application infrastructure."""

from .device_token import DeviceTokenModel
from .preferences import NotificationPreferencesModel
from .sent_notification import SentNotificationModel
from .topic import SubscriptionModel, TopicModel

__all__ = [
    "DeviceTokenModel",
    "NotificationPreferencesModel",
    "SentNotificationModel",
    "SubscriptionModel",
    "TopicModel",
]
