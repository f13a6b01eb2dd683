"""Aggregate application use cases."""

from .devices import deactivate_device, register_device
from .notifications import DispatchEngine, get_notification_stats, send_notification
from .topics import subscribe_device, unsubscribe_device

__all__ = [
    "DispatchEngine",
    "deactivate_device",
    "get_notification_stats",
    "register_device",
    "send_notification",
    "subscribe_device",
    "unsubscribe_device",
]
