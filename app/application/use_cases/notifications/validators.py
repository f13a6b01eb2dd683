"""Validation helpers for notification payloads."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlparse

from app.domain.entities import NotificationPayload
from app.domain.errors import ValidationError


def _required_text(value: str | None, label: str) -> str:
    normalized = (value or "").strip()
    if not normalized:
        raise ValidationError(f"Notification {label} is required")
    return normalized


def _optional_text(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def _ensure_image_url(value: str | None) -> str | None:
    url = _optional_text(value)
    if url is None:
        return None
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValidationError("Notification image URL must be an absolute http(s) URL")
    return url


def _ensure_data(data: Mapping[str, Any] | None) -> dict[str, str]:
    if not data:
        return {}
    normalized: dict[str, str] = {}
    for key, value in data.items():
        if not isinstance(key, str) or not key.strip():
            raise ValidationError("Notification data keys must be non-empty strings")
        if value is None:
            raise ValidationError(f"Notification data value for '{key}' cannot be null")
        # FCM data maps only carry strings.
        normalized[key] = value if isinstance(value, str) else str(value)
    return normalized


def build_payload(
    *,
    title: str | None,
    body: str | None,
    data: Mapping[str, Any] | None = None,
    image_url: str | None = None,
    click_action: str | None = None,
) -> NotificationPayload:
    """Validate raw input and return an immutable ``NotificationPayload``."""

    return NotificationPayload(
        title=_required_text(title, "title"),
        body=_required_text(body, "body"),
        data=_ensure_data(data),
        image_url=_ensure_image_url(image_url),
        click_action=_optional_text(click_action),
    )


def ensure_payload(payload: NotificationPayload) -> NotificationPayload:
    """Re-validate a payload built outside :func:`build_payload`."""

    return build_payload(
        title=payload.title,
        body=payload.body,
        data=payload.data,
        image_url=payload.image_url,
        click_action=payload.click_action,
    )


__all__ = ["build_payload", "ensure_payload"]
