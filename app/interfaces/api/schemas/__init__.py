from .device import (
    DeviceDeactivateRequest,
    DeviceRegisterRequest,
    DeviceRegisterResponse,
    DeviceSubscriptionsRead,
    DeviceTokenRead,
)
from .notification import (
    BroadcastSendRequest,
    DispatchResultRead,
    NotificationContent,
    NotificationSendRequest,
    NotificationStatsRead,
    PlatformSendRequest,
    SendSummaryRead,
    TokensSendRequest,
    TopicSendRequest,
    TopicSendResultRead,
    UserSendRequest,
)
from .preferences import PreferencesRead, PreferencesUpdate
from .topic import (
    SubscriptionRead,
    TopicRead,
    TopicSubscribeResponse,
    TopicSubscriptionRequest,
    TopicUnsubscribeResponse,
)

__all__ = [
    "BroadcastSendRequest",
    "DeviceDeactivateRequest",
    "DeviceRegisterRequest",
    "DeviceRegisterResponse",
    "DeviceSubscriptionsRead",
    "DeviceTokenRead",
    "DispatchResultRead",
    "NotificationContent",
    "NotificationSendRequest",
    "NotificationStatsRead",
    "PlatformSendRequest",
    "PreferencesRead",
    "PreferencesUpdate",
    "SendSummaryRead",
    "SubscriptionRead",
    "TokensSendRequest",
    "TopicRead",
    "TopicSendRequest",
    "TopicSendResultRead",
    "TopicSubscribeResponse",
    "TopicSubscriptionRequest",
    "TopicUnsubscribeResponse",
    "UserSendRequest",
]
