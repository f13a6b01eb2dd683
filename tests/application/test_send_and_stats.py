"""Tests for send operations, audit logging and statistics."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from app.application.use_cases.notifications import (
    build_payload,
    get_notification_stats,
    send_notification,
    send_to_all,
    send_to_platform,
    send_to_tokens,
    send_to_topic,
    send_to_user,
)
from app.application.use_cases.topics import subscribe_device
from app.domain.entities import NotificationPayload, SentNotification, TopicDispatchResult
from app.domain.errors import ChannelFailure, NotFoundError, PersistenceError, ValidationError
from app.infrastructure.models import SentNotificationModel
from app.infrastructure.repositories import SentNotificationRepository

PAYLOAD = NotificationPayload(title="Hi", body="There")


def test_send_to_platform_targets_only_active_devices(
    session, dispatch_engine, channel, make_device
) -> None:
    make_device("ios-1", platform="ios")
    make_device("ios-2", platform="ios")
    make_device("ios-3", platform="ios", active=False)
    make_device("android-1", platform="android")

    summary = send_to_platform(session, dispatch_engine, platform="ios", payload=PAYLOAD)

    assert len(channel.calls) == 1
    assert sorted(channel.calls[0].tokens) == ["ios-1", "ios-2"]
    assert (summary.total_sent, summary.total_failed) == (2, 0)
    assert summary.success is True


def test_dry_run_leaves_no_audit_records(session, dispatch_engine, make_device) -> None:
    for token in ("token-a", "token-b", "token-c"):
        make_device(token, user_id="user-1")

    summary = send_to_user(
        session, dispatch_engine, user_id="user-1", payload=PAYLOAD, dry_run=True
    )

    assert summary.total_sent == 3
    assert session.query(SentNotificationModel).count() == 0


def test_live_send_records_one_row_per_result(session, dispatch_engine, make_device) -> None:
    devices = {token: make_device(token, user_id="user-1") for token in ("a", "b", "c")}

    send_to_user(session, dispatch_engine, user_id="user-1", payload=PAYLOAD)

    rows = session.query(SentNotificationModel).all()
    assert len(rows) == 3
    assert {row.device_id for row in rows} == {device.id for device in devices.values()}
    assert {row.status for row in rows} == {"sent"}
    assert all(row.message_id for row in rows)


def test_partial_failures_are_recorded_as_failed(
    session, dispatch_engine, channel, make_device
) -> None:
    make_device("known")
    channel.fail_tokens(["unknown"], error="Requested entity was not found.")

    summary = send_to_tokens(
        session, dispatch_engine, tokens=["known", "unknown"], payload=PAYLOAD
    )

    assert (summary.total_sent, summary.total_failed) == (1, 1)
    failed = session.query(SentNotificationModel).filter_by(status="failed").one()
    assert failed.device_id is None
    assert failed.error_message == "Requested entity was not found."


def test_send_to_tokens_requires_tokens(session, dispatch_engine) -> None:
    with pytest.raises(ValidationError):
        send_to_tokens(session, dispatch_engine, tokens=["", "  "], payload=PAYLOAD)


def test_send_to_user_without_devices_is_not_found(session, dispatch_engine, channel) -> None:
    with pytest.raises(NotFoundError):
        send_to_user(session, dispatch_engine, user_id="nobody", payload=PAYLOAD)
    assert channel.calls == []


def test_multicast_channel_failure_is_not_logged(
    session, dispatch_engine, channel, make_device
) -> None:
    make_device("token-a")
    channel.fail_next_call()

    with pytest.raises(ChannelFailure):
        send_to_all(session, dispatch_engine, payload=PAYLOAD)
    assert session.query(SentNotificationModel).count() == 0


def test_audit_failure_does_not_fail_the_send(
    session, dispatch_engine, make_device, monkeypatch
) -> None:
    make_device("token-a")

    def _broken_create_many(self, records):
        raise PersistenceError("Could not store sent notifications")

    monkeypatch.setattr(SentNotificationRepository, "create_many", _broken_create_many)

    summary = send_to_all(session, dispatch_engine, payload=PAYLOAD)

    assert summary.total_sent == 1


def test_topic_send_is_logged_with_topic_reference(
    session, dispatch_engine, make_device
) -> None:
    make_device("token-a")
    topic = subscribe_device(session, token="token-a", topic_name="news").topic

    result = send_to_topic(session, dispatch_engine, topic="news", payload=PAYLOAD)

    assert result.success is True
    row = session.query(SentNotificationModel).one()
    assert row.topic_id == topic.id
    assert row.device_id is None
    assert row.message_id == result.message_id


def test_failed_topic_send_is_logged_and_returned(session, dispatch_engine, channel) -> None:
    channel.fail_topics(["unknown-topic"])

    result = send_to_topic(session, dispatch_engine, topic="unknown-topic", payload=PAYLOAD)

    assert result.success is False
    row = session.query(SentNotificationModel).one()
    assert row.status == "failed"
    assert row.topic_id is None
    assert row.error_message == "Topic quota exceeded"


def test_unified_send_routes_by_type(session, dispatch_engine, make_device) -> None:
    make_device("token-a", platform="web", user_id="user-1")

    by_user = send_notification(
        session, dispatch_engine, send_type="user", user_id="user-1", payload=PAYLOAD
    )
    by_topic = send_notification(
        session, dispatch_engine, send_type="topic", topic="news", payload=PAYLOAD
    )
    by_platform = send_notification(
        session, dispatch_engine, send_type="PLATFORM", platform="web", payload=PAYLOAD
    )

    assert by_user.total_sent == 1
    assert isinstance(by_topic, TopicDispatchResult)
    assert by_platform.total_sent == 1


@pytest.mark.parametrize(
    ("send_type", "kwargs"),
    [
        ("user", {}),
        ("tokens", {"tokens": []}),
        ("topic", {}),
        ("platform", {}),
        ("sms", {}),
    ],
)
def test_unified_send_validates_parameters(session, dispatch_engine, send_type, kwargs) -> None:
    with pytest.raises(ValidationError):
        send_notification(
            session, dispatch_engine, send_type=send_type, payload=PAYLOAD, **kwargs
        )


@pytest.mark.parametrize(
    "fields",
    [
        {"title": "", "body": "There"},
        {"title": "Hi", "body": "   "},
        {"title": "Hi", "body": "There", "image_url": "ftp://example.com/a.png"},
        {"title": "Hi", "body": "There", "data": {"": "value"}},
    ],
)
def test_build_payload_rejects_invalid_content(fields) -> None:
    with pytest.raises(ValidationError):
        build_payload(**fields)


def test_build_payload_stringifies_data_values() -> None:
    payload = build_payload(title=" Hi ", body="There", data={"count": 3, "flag": True})

    assert payload.title == "Hi"
    assert payload.data == {"count": "3", "flag": "True"}


def _store(session, status: str, sent_at: datetime) -> None:
    SentNotificationRepository(session).create_many(
        [SentNotification(id=None, title="Hi", body="There", status=status, sent_at=sent_at)]
    )


def test_stats_without_range_count_everything(session) -> None:
    base = datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc)
    for status in ("sent", "sent", "failed", "delivered", "pending"):
        _store(session, status, base)

    stats = get_notification_stats(session)

    assert (stats.total, stats.sent, stats.delivered, stats.failed, stats.pending) == (
        5,
        2,
        1,
        1,
        1,
    )


def test_stats_range_is_inclusive(session) -> None:
    start = datetime(2024, 1, 10, tzinfo=timezone.utc)
    end = start + timedelta(days=1)
    _store(session, "sent", start - timedelta(seconds=1))
    _store(session, "sent", start)
    _store(session, "failed", start + timedelta(hours=6))
    _store(session, "sent", end)
    _store(session, "sent", end + timedelta(seconds=1))

    stats = get_notification_stats(session, start=start, end=end)

    assert (stats.total, stats.sent, stats.failed) == (3, 2, 1)
    assert get_notification_stats(session, start=end).total == 2
    assert get_notification_stats(session, end=start).total == 2


def test_stats_reject_inverted_range(session) -> None:
    start = datetime(2024, 1, 10, tzinfo=timezone.utc)

    with pytest.raises(ValidationError):
        get_notification_stats(session, start=start, end=start - timedelta(days=1))
