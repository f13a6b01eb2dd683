"""Use cases for managing device push tokens."""

from .deactivate_device import deactivate_device
from .get_device_subscriptions import DeviceSubscriptions, get_device_subscriptions
from .list_devices import list_active_devices, list_user_devices
from .register_device import DeviceRegistration, register_device

__all__ = [
    "DeviceRegistration",
    "DeviceSubscriptions",
    "deactivate_device",
    "get_device_subscriptions",
    "list_active_devices",
    "list_user_devices",
    "register_device",
]
