"""Tests for the dispatch engine result normalisation."""

from __future__ import annotations

import pytest

from app.application.use_cases.notifications import DispatchEngine
from app.config import get_settings
from app.domain.entities import NotificationPayload
from app.domain.errors import ChannelFailure
from app.infrastructure.push import ChannelResponse, FakeDeliveryChannel

PAYLOAD = NotificationPayload(
    title="Hi",
    body="There",
    data={"order_id": "42"},
    image_url="https://example.com/image.png",
    click_action="OPEN_ORDER",
)


def test_results_follow_input_order_one_per_token(dispatch_engine, channel) -> None:
    tokens = ["token-a", "token-b", "token-c", "token-d"]
    channel.fail_tokens(["token-b", "token-d"], error="Requested entity was not found.")

    results = dispatch_engine.dispatch_to_tokens(tokens, PAYLOAD)

    assert [result.token for result in results] == tokens
    assert [result.success for result in results] == [True, False, True, False]
    for result in results:
        if result.success:
            assert result.message_id and result.error is None
        else:
            assert result.error and result.message_id is None
    assert channel.calls[0].tokens == tuple(tokens)


def test_empty_token_list_does_not_contact_the_channel(dispatch_engine, channel) -> None:
    assert dispatch_engine.dispatch_to_tokens([], PAYLOAD) == []
    assert channel.calls == []


def test_dry_run_flag_reaches_the_channel(dispatch_engine, channel) -> None:
    results = dispatch_engine.dispatch_to_tokens(["token-a"], PAYLOAD, dry_run=True)

    assert results[0].success is True
    assert channel.calls[0].dry_run is True


def test_multicast_channel_failure_propagates(dispatch_engine, channel) -> None:
    channel.fail_next_call("Service unavailable")

    with pytest.raises(ChannelFailure, match="Service unavailable"):
        dispatch_engine.dispatch_to_tokens(["token-a"], PAYLOAD)


class _ShortChannel(FakeDeliveryChannel):
    def send_multicast(self, message, tokens, *, dry_run=False):
        return [ChannelResponse(success=True, message_id="id-1")]


class _BlankResponseChannel(FakeDeliveryChannel):
    def send_multicast(self, message, tokens, *, dry_run=False):
        return [ChannelResponse(success=True, message_id=None), ChannelResponse(success=False)]


def test_response_count_mismatch_is_a_channel_failure() -> None:
    engine = DispatchEngine(_ShortChannel(), get_settings())

    with pytest.raises(ChannelFailure):
        engine.dispatch_to_tokens(["token-a", "token-b"], PAYLOAD)


def test_incomplete_responses_become_failures_with_an_error() -> None:
    engine = DispatchEngine(_BlankResponseChannel(), get_settings())

    results = engine.dispatch_to_tokens(["token-a", "token-b"], PAYLOAD)

    assert [result.success for result in results] == [False, False]
    assert [result.error for result in results] == ["Unknown error", "Unknown error"]


def test_topic_dispatch_returns_aggregate_result(dispatch_engine, channel) -> None:
    result = dispatch_engine.dispatch_to_topic("news", PAYLOAD)

    assert result.success is True
    assert result.message_id.startswith("projects/fake/messages/")
    assert (result.total_sent, result.total_failed) == (1, 0)
    assert channel.calls[0].topic == "news"


def test_topic_channel_failure_becomes_failed_result(dispatch_engine, channel) -> None:
    channel.fail_topics(["news"], error="Topic quota exceeded")

    result = dispatch_engine.dispatch_to_topic("news", PAYLOAD)

    assert result.success is False
    assert result.error == "Topic quota exceeded"
    assert result.message_id is None
    assert (result.total_sent, result.total_failed) == (0, 1)


def test_render_adds_platform_decorations() -> None:
    settings = get_settings().model_copy(
        update={"notification_sound": "chime", "apns_badge": 3, "webpush_icon": "/icon.png"}
    )
    engine = DispatchEngine(FakeDeliveryChannel(), settings)

    message = engine.render(PAYLOAD)

    assert (message.title, message.body) == ("Hi", "There")
    assert message.image_url == "https://example.com/image.png"
    assert message.data == {"order_id": "42"}
    assert message.android.click_action == "OPEN_ORDER"
    assert message.android.sound == "chime"
    assert (message.apns.sound, message.apns.badge) == ("chime", 3)
    assert message.webpush.icon == "/icon.png"
    assert message.webpush.badge == "/badge-72x72.png"
