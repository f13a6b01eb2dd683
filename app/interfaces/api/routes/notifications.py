"""Endpoints that send push notifications and report delivery statistics."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    DispatchEngine,
    build_payload,
    get_notification_stats as get_notification_stats_uc,
    send_notification as send_notification_uc,
    send_to_all as send_to_all_uc,
    send_to_platform as send_to_platform_uc,
    send_to_tokens as send_to_tokens_uc,
    send_to_topic as send_to_topic_uc,
    send_to_user as send_to_user_uc,
)
from app.domain.entities import NotificationPayload, TopicDispatchResult
from app.domain.errors import PushDispatchError
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_dispatch_engine
from app.interfaces.api.routes_helpers import (
    error_to_http,
    summary_to_schema,
    topic_result_to_schema,
)
from app.interfaces.api.schemas import (
    BroadcastSendRequest,
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

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _payload_from_request(request: NotificationContent) -> NotificationPayload:
    return build_payload(
        title=request.title,
        body=request.body,
        data=request.data,
        image_url=request.image_url,
        click_action=request.click_action,
    )


@router.post("/send", response_model=SendSummaryRead | TopicSendResultRead)
def send_notification(
    request: NotificationSendRequest,
    db: Session = Depends(get_db),
    engine: DispatchEngine = Depends(get_dispatch_engine),
) -> SendSummaryRead | TopicSendResultRead:
    """Send a notification to the target selected by ``type``."""

    try:
        outcome = send_notification_uc(
            db,
            engine,
            send_type=request.type,
            payload=_payload_from_request(request),
            user_id=request.user_id,
            tokens=request.tokens,
            topic=request.topic,
            platform=request.platform,
            dry_run=request.dry_run,
        )
    except PushDispatchError as exc:
        raise error_to_http(exc) from exc

    if isinstance(outcome, TopicDispatchResult):
        return topic_result_to_schema(outcome)
    return summary_to_schema(outcome)


@router.post("/users", response_model=SendSummaryRead)
def send_to_user(
    request: UserSendRequest,
    db: Session = Depends(get_db),
    engine: DispatchEngine = Depends(get_dispatch_engine),
) -> SendSummaryRead:
    """Send to every active device owned by a user."""

    try:
        summary = send_to_user_uc(
            db,
            engine,
            user_id=request.user_id,
            payload=_payload_from_request(request),
            dry_run=request.dry_run,
        )
    except PushDispatchError as exc:
        raise error_to_http(exc) from exc
    return summary_to_schema(summary)


@router.post("/tokens", response_model=SendSummaryRead)
def send_to_tokens(
    request: TokensSendRequest,
    db: Session = Depends(get_db),
    engine: DispatchEngine = Depends(get_dispatch_engine),
) -> SendSummaryRead:
    try:
        summary = send_to_tokens_uc(
            db,
            engine,
            tokens=request.tokens,
            payload=_payload_from_request(request),
            dry_run=request.dry_run,
        )
    except PushDispatchError as exc:
        raise error_to_http(exc) from exc
    return summary_to_schema(summary)


@router.post("/topics", response_model=TopicSendResultRead)
def send_to_topic(
    request: TopicSendRequest,
    db: Session = Depends(get_db),
    engine: DispatchEngine = Depends(get_dispatch_engine),
) -> TopicSendResultRead:
    """Send to a topic; delivery channel errors come back as a failed result."""

    try:
        result = send_to_topic_uc(
            db,
            engine,
            topic=request.topic,
            payload=_payload_from_request(request),
            dry_run=request.dry_run,
        )
    except PushDispatchError as exc:
        raise error_to_http(exc) from exc
    return topic_result_to_schema(result)


@router.post("/platforms", response_model=SendSummaryRead)
def send_to_platform(
    request: PlatformSendRequest,
    db: Session = Depends(get_db),
    engine: DispatchEngine = Depends(get_dispatch_engine),
) -> SendSummaryRead:
    try:
        summary = send_to_platform_uc(
            db,
            engine,
            platform=request.platform,
            payload=_payload_from_request(request),
            dry_run=request.dry_run,
        )
    except PushDispatchError as exc:
        raise error_to_http(exc) from exc
    return summary_to_schema(summary)


@router.post("/broadcast", response_model=SendSummaryRead)
def send_to_all(
    request: BroadcastSendRequest,
    db: Session = Depends(get_db),
    engine: DispatchEngine = Depends(get_dispatch_engine),
) -> SendSummaryRead:
    try:
        summary = send_to_all_uc(
            db,
            engine,
            payload=_payload_from_request(request),
            dry_run=request.dry_run,
        )
    except PushDispatchError as exc:
        raise error_to_http(exc) from exc
    return summary_to_schema(summary)


@router.get("/stats", response_model=NotificationStatsRead)
def get_notification_stats(
    start_date: datetime | None = Query(default=None),
    end_date: datetime | None = Query(default=None),
    db: Session = Depends(get_db),
) -> NotificationStatsRead:
    """Count sent notifications by status within an optional date range."""

    try:
        stats = get_notification_stats_uc(db, start=start_date, end=end_date)
    except PushDispatchError as exc:
        raise error_to_http(exc) from exc
    return NotificationStatsRead(
        total=stats.total,
        sent=stats.sent,
        delivered=stats.delivered,
        failed=stats.failed,
        pending=stats.pending,
        start_date=start_date,
        end_date=end_date,
    )
