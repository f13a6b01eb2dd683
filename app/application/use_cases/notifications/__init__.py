"""Use cases that dispatch notifications and report on them."""

from .audit import NotificationLogger
from .dispatcher import DispatchEngine
from .resolver import resolve_tokens
from .send import (
    SEND_TYPES,
    SendOutcome,
    send_notification,
    send_to_all,
    send_to_platform,
    send_to_tokens,
    send_to_topic,
    send_to_user,
)
from .stats import get_notification_stats
from .validators import build_payload, ensure_payload

__all__ = [
    "DispatchEngine",
    "NotificationLogger",
    "SEND_TYPES",
    "SendOutcome",
    "build_payload",
    "ensure_payload",
    "get_notification_stats",
    "resolve_tokens",
    "send_notification",
    "send_to_all",
    "send_to_platform",
    "send_to_tokens",
    "send_to_topic",
    "send_to_user",
]
