"""Push delivery channel adapters."""

from __future__ import annotations

from app.config import DELIVERY_CHANNEL_FAKE, Settings

from .channel import ChannelResponse, DeliveryChannel
from .fake import FakeDeliveryChannel, RecordedSend
from .message import AndroidOptions, ApnsOptions, PushMessage, WebpushOptions


def build_delivery_channel(settings: Settings) -> DeliveryChannel:
    """Return the delivery channel selected by ``DELIVERY_CHANNEL``."""

    if settings.delivery_channel == DELIVERY_CHANNEL_FAKE:
        return FakeDeliveryChannel()

    from .firebase import FirebaseDeliveryChannel

    return FirebaseDeliveryChannel.from_settings(settings)


__all__ = [
    "AndroidOptions",
    "ApnsOptions",
    "ChannelResponse",
    "DeliveryChannel",
    "FakeDeliveryChannel",
    "PushMessage",
    "RecordedSend",
    "WebpushOptions",
    "build_delivery_channel",
]
