"""Use cases for topics and device subscriptions."""

from .list_topics import list_topics
from .subscribe_device import TopicSubscription, subscribe_device
from .unsubscribe_device import unsubscribe_device

__all__ = [
    "TopicSubscription",
    "list_topics",
    "subscribe_device",
    "unsubscribe_device",
]
