"""Integration tests for the notification endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

CONTENT = {"title": "Hi", "body": "There"}


def _register(client: TestClient, token: str, platform: str = "android", **fields) -> None:
    response = client.post(
        "/devices/register", json={"token": token, "platform": platform, **fields}
    )
    assert response.status_code in (200, 201), response.text


def test_send_to_platform_skips_inactive_devices(client: TestClient, channel) -> None:
    for token in ("ios-1", "ios-2", "ios-3"):
        _register(client, token, platform="ios")
    client.post("/devices/deactivate", json={"token": "ios-3"})

    response = client.post("/notifications/platforms", json={**CONTENT, "platform": "ios"})

    assert response.status_code == 200
    body = response.json()
    assert (body["success"], body["total_sent"], body["total_failed"]) == (True, 2, 0)
    assert sorted(channel.calls[0].tokens) == ["ios-1", "ios-2"]


def test_send_to_tokens_reports_partial_failures(client: TestClient, channel) -> None:
    channel.fail_tokens(["stale"])

    response = client.post(
        "/notifications/tokens", json={**CONTENT, "tokens": ["fresh", "stale"]}
    )

    assert response.status_code == 200
    body = response.json()
    assert (body["total_sent"], body["total_failed"]) == (1, 1)
    assert body["results"][0]["token"] == "fresh"
    assert body["results"][0]["message_id"]
    assert body["results"][1] == {
        "success": False,
        "token": "stale",
        "message_id": None,
        "error": "Requested entity was not found.",
    }


def test_send_to_user_without_devices_returns_404(client: TestClient, channel) -> None:
    response = client.post("/notifications/users", json={**CONTENT, "user_id": "ghost"})

    assert response.status_code == 404
    assert channel.calls == []


def test_multicast_channel_failure_returns_502(client: TestClient, channel) -> None:
    _register(client, "token-a")
    channel.fail_next_call("Service unavailable")

    response = client.post("/notifications/broadcast", json=CONTENT)

    assert response.status_code == 502
    assert response.json()["detail"] == "Service unavailable"


def test_topic_failure_is_returned_as_result(client: TestClient, channel) -> None:
    channel.fail_topics(["news"])

    response = client.post("/notifications/topics", json={**CONTENT, "topic": "news"})

    assert response.status_code == 200
    assert response.json() == {
        "success": False,
        "topic": "news",
        "message_id": None,
        "error": "Topic quota exceeded",
        "total_sent": 0,
        "total_failed": 1,
    }


def test_unified_send_and_stats(client: TestClient) -> None:
    _register(client, "token-a", user_id="user-1")
    _register(client, "token-b", user_id="user-1")

    dry_run = client.post(
        "/notifications/send",
        json={**CONTENT, "type": "user", "user_id": "user-1", "dry_run": True},
    )
    assert dry_run.status_code == 200
    assert dry_run.json()["total_sent"] == 2
    assert client.get("/notifications/stats").json()["total"] == 0

    live = client.post(
        "/notifications/send", json={**CONTENT, "type": "user", "user_id": "user-1"}
    )
    topic = client.post("/notifications/send", json={**CONTENT, "type": "topic", "topic": "news"})
    assert live.json()["total_sent"] == 2
    assert topic.json()["total_sent"] == 1

    stats = client.get("/notifications/stats").json()
    assert (stats["total"], stats["sent"], stats["failed"]) == (3, 3, 0)


def test_unified_send_requires_type_parameter(client: TestClient) -> None:
    response = client.post("/notifications/send", json={**CONTENT, "type": "platform"})

    assert response.status_code == 400


def test_blank_title_is_rejected(client: TestClient) -> None:
    response = client.post(
        "/notifications/tokens", json={"title": "  ", "body": "There", "tokens": ["a"]}
    )

    assert response.status_code == 400


def test_stats_with_inverted_range_returns_400(client: TestClient) -> None:
    response = client.get(
        "/notifications/stats",
        params={"start_date": "2024-02-01T00:00:00", "end_date": "2024-01-01T00:00:00"},
    )

    assert response.status_code == 400
