"""Tests for topic subscription state transitions."""

from __future__ import annotations

import pytest

from app.application.use_cases.topics import list_topics, subscribe_device, unsubscribe_device
from app.domain.errors import NotFoundError, ValidationError
from app.infrastructure.models import SubscriptionModel, TopicModel


def test_subscribing_twice_keeps_one_active_row(session, make_device) -> None:
    make_device("token-a")

    first = subscribe_device(session, token="token-a", topic_name="news")
    second = subscribe_device(session, token="token-a", topic_name="news")

    assert first.topic_created is True
    assert second.topic_created is False
    assert second.subscription.id == first.subscription.id
    rows = session.query(SubscriptionModel).all()
    assert len(rows) == 1
    assert rows[0].is_active is True


def test_unsubscribe_then_resubscribe_reuses_the_row(session, make_device) -> None:
    make_device("token-a")
    original = subscribe_device(session, token="token-a", topic_name="news").subscription

    assert unsubscribe_device(session, token="token-a", topic_name="news") == 1
    session.expire_all()
    row = session.query(SubscriptionModel).one()
    assert row.is_active is False

    again = subscribe_device(session, token="token-a", topic_name="news").subscription

    assert again.id == original.id
    assert again.is_active is True
    assert again.created_at == original.created_at
    assert session.query(SubscriptionModel).count() == 1


def test_unsubscribing_twice_reports_no_change(session, make_device) -> None:
    make_device("token-a")
    subscribe_device(session, token="token-a", topic_name="news")

    unsubscribe_device(session, token="token-a", topic_name="news")

    assert unsubscribe_device(session, token="token-a", topic_name="news") == 0


def test_subscribe_auto_creates_topic_with_description(session, make_device) -> None:
    make_device("token-a")

    result = subscribe_device(session, token="token-a", topic_name="  promos ")

    assert result.topic.name == "promos"
    assert result.topic.description == "Auto-created topic: promos"
    assert session.query(TopicModel).count() == 1


def test_subscribe_requires_a_registered_device(session) -> None:
    with pytest.raises(NotFoundError, match="register your device first"):
        subscribe_device(session, token="missing", topic_name="news")

    assert session.query(TopicModel).count() == 0


@pytest.mark.parametrize("topic_name", ["", "   "])
def test_subscribe_rejects_blank_topic(session, make_device, topic_name) -> None:
    make_device("token-a")

    with pytest.raises(ValidationError):
        subscribe_device(session, token="token-a", topic_name=topic_name)


def test_unsubscribe_unknown_device_or_topic(session, make_device) -> None:
    make_device("token-a")

    with pytest.raises(NotFoundError):
        unsubscribe_device(session, token="missing", topic_name="news")
    with pytest.raises(NotFoundError):
        unsubscribe_device(session, token="token-a", topic_name="unknown")


def test_list_topics_returns_active_topics_by_name(session) -> None:
    session.add_all(
        [
            TopicModel(name="weather", is_active=True),
            TopicModel(name="alerts", is_active=True),
            TopicModel(name="legacy", is_active=False),
        ]
    )
    session.commit()

    assert [topic.name for topic in list_topics(session)] == ["alerts", "weather"]
