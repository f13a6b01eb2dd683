"""Domain entities exposed by the application."""

from .device_token import (
    PLATFORM_ANDROID,
    PLATFORM_IOS,
    PLATFORM_WEB,
    PLATFORMS,
    DeviceToken,
)
from .notification import (
    NOTIFICATION_STATUS_DELIVERED,
    NOTIFICATION_STATUS_FAILED,
    NOTIFICATION_STATUS_PENDING,
    NOTIFICATION_STATUS_SENT,
    NOTIFICATION_STATUSES,
    UNKNOWN_DELIVERY_ERROR,
    DispatchResult,
    NotificationPayload,
    NotificationStats,
    SendSummary,
    SentNotification,
    TopicDispatchResult,
)
from .preferences import NotificationPreferences
from .target import (
    AllDevicesTarget,
    PlatformTarget,
    TargetSelector,
    TokensTarget,
    UserTarget,
)
from .topic import AUTO_CREATED_TOPIC_DESCRIPTION, Subscription, Topic

__all__ = [
    "AUTO_CREATED_TOPIC_DESCRIPTION",
    "AllDevicesTarget",
    "DeviceToken",
    "DispatchResult",
    "NOTIFICATION_STATUSES",
    "NOTIFICATION_STATUS_DELIVERED",
    "NOTIFICATION_STATUS_FAILED",
    "NOTIFICATION_STATUS_PENDING",
    "NOTIFICATION_STATUS_SENT",
    "NotificationPayload",
    "NotificationPreferences",
    "NotificationStats",
    "PLATFORMS",
    "PLATFORM_ANDROID",
    "PLATFORM_IOS",
    "PLATFORM_WEB",
    "PlatformTarget",
    "SendSummary",
    "SentNotification",
    "Subscription",
    "TargetSelector",
    "Topic",
    "TopicDispatchResult",
    "TokensTarget",
    "UNKNOWN_DELIVERY_ERROR",
    "UserTarget",
]
