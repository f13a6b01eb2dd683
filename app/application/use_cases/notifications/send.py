"""Send operations combining resolution, dispatch and audit logging."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeAlias

from sqlalchemy.orm import Session

from app.domain.entities import (
    AllDevicesTarget,
    NotificationPayload,
    PlatformTarget,
    SendSummary,
    TargetSelector,
    TokensTarget,
    TopicDispatchResult,
    UserTarget,
)
from app.domain.errors import ValidationError

from .audit import NotificationLogger
from .dispatcher import DispatchEngine
from .resolver import resolve_tokens
from .validators import ensure_payload

SEND_TYPE_USER = "user"
SEND_TYPE_TOKENS = "tokens"
SEND_TYPE_TOPIC = "topic"
SEND_TYPE_PLATFORM = "platform"
SEND_TYPE_ALL = "all"
SEND_TYPES = (
    SEND_TYPE_USER,
    SEND_TYPE_TOKENS,
    SEND_TYPE_TOPIC,
    SEND_TYPE_PLATFORM,
    SEND_TYPE_ALL,
)

SendOutcome: TypeAlias = SendSummary | TopicDispatchResult


def _send_to_selector(
    session: Session,
    engine: DispatchEngine,
    selector: TargetSelector,
    payload: NotificationPayload,
    *,
    dry_run: bool,
) -> SendSummary:
    payload = ensure_payload(payload)
    tokens = resolve_tokens(session, selector)
    results = engine.dispatch_to_tokens(tokens, payload, dry_run=dry_run)
    NotificationLogger(session).log_results(payload, results, dry_run=dry_run)
    return SendSummary(results=tuple(results))


def send_to_user(
    session: Session,
    engine: DispatchEngine,
    *,
    user_id: str,
    payload: NotificationPayload,
    dry_run: bool = False,
) -> SendSummary:
    return _send_to_selector(session, engine, UserTarget(user_id), payload, dry_run=dry_run)


def send_to_tokens(
    session: Session,
    engine: DispatchEngine,
    *,
    tokens: Sequence[str],
    payload: NotificationPayload,
    dry_run: bool = False,
) -> SendSummary:
    """Send to explicit tokens; unknown tokens surface as per-token failures."""

    cleaned = tuple(token.strip() for token in tokens if token and token.strip())
    if not cleaned:
        raise ValidationError("At least one push token is required")
    return _send_to_selector(session, engine, TokensTarget(cleaned), payload, dry_run=dry_run)


def send_to_platform(
    session: Session,
    engine: DispatchEngine,
    *,
    platform: str,
    payload: NotificationPayload,
    dry_run: bool = False,
) -> SendSummary:
    return _send_to_selector(
        session, engine, PlatformTarget(platform), payload, dry_run=dry_run
    )


def send_to_all(
    session: Session,
    engine: DispatchEngine,
    *,
    payload: NotificationPayload,
    dry_run: bool = False,
) -> SendSummary:
    return _send_to_selector(session, engine, AllDevicesTarget(), payload, dry_run=dry_run)


def send_to_topic(
    session: Session,
    engine: DispatchEngine,
    *,
    topic: str,
    payload: NotificationPayload,
    dry_run: bool = False,
) -> TopicDispatchResult:
    """Send to every subscriber of ``topic``; never raises for channel errors."""

    topic_name = (topic or "").strip()
    if not topic_name:
        raise ValidationError("A topic name is required")
    payload = ensure_payload(payload)
    result = engine.dispatch_to_topic(topic_name, payload, dry_run=dry_run)
    NotificationLogger(session).log_topic_result(payload, result, dry_run=dry_run)
    return result


def send_notification(
    session: Session,
    engine: DispatchEngine,
    *,
    send_type: str,
    payload: NotificationPayload,
    user_id: str | None = None,
    tokens: Sequence[str] | None = None,
    topic: str | None = None,
    platform: str | None = None,
    dry_run: bool = False,
) -> SendOutcome:
    """Route a send request to the operation selected by ``send_type``."""

    normalized = (send_type or "").strip().lower()
    if normalized == SEND_TYPE_USER:
        if not user_id:
            raise ValidationError("user_id is required when type is 'user'")
        return send_to_user(session, engine, user_id=user_id, payload=payload, dry_run=dry_run)
    if normalized == SEND_TYPE_TOKENS:
        if not tokens:
            raise ValidationError("tokens are required when type is 'tokens'")
        return send_to_tokens(session, engine, tokens=tokens, payload=payload, dry_run=dry_run)
    if normalized == SEND_TYPE_TOPIC:
        if not topic:
            raise ValidationError("topic is required when type is 'topic'")
        return send_to_topic(session, engine, topic=topic, payload=payload, dry_run=dry_run)
    if normalized == SEND_TYPE_PLATFORM:
        if not platform:
            raise ValidationError("platform is required when type is 'platform'")
        return send_to_platform(
            session, engine, platform=platform, payload=payload, dry_run=dry_run
        )
    if normalized == SEND_TYPE_ALL:
        return send_to_all(session, engine, payload=payload, dry_run=dry_run)

    raise ValidationError(f"Send type must be one of: {', '.join(SEND_TYPES)}")


__all__ = [
    "SEND_TYPES",
    "SEND_TYPE_ALL",
    "SEND_TYPE_PLATFORM",
    "SEND_TYPE_TOKENS",
    "SEND_TYPE_TOPIC",
    "SEND_TYPE_USER",
    "SendOutcome",
    "send_notification",
    "send_to_all",
    "send_to_platform",
    "send_to_tokens",
    "send_to_topic",
    "send_to_user",
]
