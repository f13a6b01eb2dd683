"""Channel-neutral representation of a rendered push message."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AndroidOptions:
    click_action: str | None = None
    sound: str | None = None


@dataclass(frozen=True)
class ApnsOptions:
    sound: str | None = None
    badge: int | None = None


@dataclass(frozen=True)
class WebpushOptions:
    icon: str | None = None
    badge: str | None = None


@dataclass(frozen=True)
class PushMessage:
    """Generic notification block plus per-platform decorations.

    Delivery channels translate this into their own wire format; the
    dispatch engine is the only producer.
    """

    title: str
    body: str
    image_url: str | None = None
    data: dict[str, str] = field(default_factory=dict)
    android: AndroidOptions = field(default_factory=AndroidOptions)
    apns: ApnsOptions = field(default_factory=ApnsOptions)
    webpush: WebpushOptions = field(default_factory=WebpushOptions)


__all__ = ["AndroidOptions", "ApnsOptions", "PushMessage", "WebpushOptions"]
