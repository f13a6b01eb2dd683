"""Tests for device registration and deactivation."""

from __future__ import annotations

import pytest

from app.application.use_cases.devices import (
    deactivate_device,
    get_device_subscriptions,
    list_active_devices,
    list_user_devices,
    register_device,
)
from app.application.use_cases.topics import subscribe_device
from app.domain.errors import NotFoundError, ValidationError
from app.infrastructure.models import DeviceTokenModel, SubscriptionModel


def test_registering_same_token_twice_updates_the_single_row(session) -> None:
    first = register_device(
        session,
        token="token-a",
        platform="android",
        user_id="user-1",
        app_version="1.0.0",
        device_model="Pixel 7",
    )
    second = register_device(
        session,
        token="token-a",
        platform="ios",
        app_version="2.0.0",
        os_version="17.1",
    )

    assert first.created is True
    assert second.created is False
    assert second.device.id == first.device.id
    assert session.query(DeviceTokenModel).count() == 1

    stored = second.device
    assert stored.platform == "ios"
    assert stored.app_version == "2.0.0"
    assert stored.os_version == "17.1"
    assert stored.device_model == "Pixel 7"
    assert stored.user_id == "user-1"


def test_registering_with_new_owner_replaces_the_owner(session) -> None:
    register_device(session, token="token-a", platform="web", user_id="user-1")
    result = register_device(session, token="token-a", platform="web", user_id="user-2")

    assert result.device.user_id == "user-2"


def test_registering_a_different_token_creates_a_second_row(session) -> None:
    register_device(session, token="token-a", platform="android")
    register_device(session, token="token-b", platform="android")

    assert session.query(DeviceTokenModel).count() == 2


def test_reregistration_reactivates_an_inactive_device(session, make_device) -> None:
    make_device("token-a", user_id="user-1", active=False)

    result = register_device(session, token="token-a", platform="android")

    assert result.device.is_active is True
    assert result.device.user_id == "user-1"


@pytest.mark.parametrize(
    ("token", "platform"),
    [
        ("", "android"),
        ("   ", "ios"),
        ("token-a", "windows"),
        ("token-a", None),
    ],
)
def test_register_rejects_invalid_input(session, token, platform) -> None:
    with pytest.raises(ValidationError):
        register_device(session, token=token, platform=platform)


def test_platform_is_normalised(session) -> None:
    result = register_device(session, token="token-a", platform=" IOS ")

    assert result.device.platform == "ios"


def test_deactivate_closes_every_subscription(session, make_device) -> None:
    make_device("token-a")
    subscribe_device(session, token="token-a", topic_name="news")
    subscribe_device(session, token="token-a", topic_name="sports")

    device = deactivate_device(session, token="token-a")

    assert device.is_active is False
    session.expire_all()
    statuses = [row.is_active for row in session.query(SubscriptionModel).all()]
    assert statuses == [False, False]
    assert session.query(DeviceTokenModel).count() == 1


def test_deactivate_unknown_token_raises_not_found(session) -> None:
    with pytest.raises(NotFoundError):
        deactivate_device(session, token="missing")


def test_listing_only_returns_active_devices(session, make_device) -> None:
    make_device("token-a", user_id="user-1")
    make_device("token-b", user_id="user-1", active=False)
    make_device("token-c", user_id="user-2")

    assert {device.token for device in list_active_devices(session)} == {"token-a", "token-c"}
    assert [device.token for device in list_user_devices(session, user_id="user-1")] == [
        "token-a"
    ]


def test_device_subscriptions_include_topic_details(session, make_device) -> None:
    make_device("token-a")
    subscribe_device(session, token="token-a", topic_name="news")

    result = get_device_subscriptions(session, token="token-a")

    assert result.device.token == "token-a"
    assert len(result.subscriptions) == 1
    assert result.subscriptions[0].topic.name == "news"


def test_device_subscriptions_for_unknown_token(session) -> None:
    with pytest.raises(NotFoundError):
        get_device_subscriptions(session, token="missing")
