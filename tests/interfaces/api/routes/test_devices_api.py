"""Integration tests for the device and topic endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient


def _register(client: TestClient, token: str, **fields) -> dict:
    payload = {"token": token, "platform": "android", **fields}
    response = client.post("/devices/register", json=payload)
    assert response.status_code in (200, 201), response.text
    return response.json()


def test_register_then_refresh_device(client: TestClient) -> None:
    response = client.post(
        "/devices/register",
        json={"token": "token-a", "platform": "ios", "user_id": "user-1", "app_version": "1.0"},
    )
    assert response.status_code == 201
    created = response.json()
    assert created["created"] is True
    assert created["device"]["platform"] == "ios"

    refresh = client.post(
        "/devices/register",
        json={"token": "token-a", "platform": "ios", "app_version": "1.1"},
    )
    assert refresh.status_code == 200
    body = refresh.json()
    assert body["created"] is False
    assert body["device"]["id"] == created["device"]["id"]
    assert body["device"]["app_version"] == "1.1"
    assert body["device"]["user_id"] == "user-1"


def test_register_rejects_unknown_platform(client: TestClient) -> None:
    response = client.post("/devices/register", json={"token": "token-a", "platform": "tv"})

    assert response.status_code == 422


def test_list_devices_and_user_devices(client: TestClient) -> None:
    _register(client, "token-a", user_id="user-1")
    _register(client, "token-b", user_id="user-2")
    client.post("/devices/deactivate", json={"token": "token-b"})

    all_devices = client.get("/devices/")
    user_devices = client.get("/devices/users/user-1")

    assert [device["token"] for device in all_devices.json()] == ["token-a"]
    assert [device["token"] for device in user_devices.json()] == ["token-a"]
    assert client.get("/devices/users/user-2").json() == []


def test_deactivate_unknown_device_returns_404(client: TestClient) -> None:
    response = client.post("/devices/deactivate", json={"token": "missing"})

    assert response.status_code == 404
    assert response.json()["detail"] == "Device token not found"


def test_subscription_lifecycle(client: TestClient) -> None:
    _register(client, "token-a")

    subscribe = client.post("/topics/subscribe", json={"token": "token-a", "topic": "news"})
    assert subscribe.status_code == 200
    assert subscribe.json()["topic_created"] is True
    assert subscribe.json()["subscription"]["topic"]["name"] == "news"

    topics = client.get("/topics/").json()
    assert [topic["name"] for topic in topics] == ["news"]
    assert topics[0]["description"] == "Auto-created topic: news"

    subscriptions = client.get("/devices/subscriptions", params={"token": "token-a"}).json()
    assert [item["topic"]["name"] for item in subscriptions["subscriptions"]] == ["news"]

    unsubscribe = client.post("/topics/unsubscribe", json={"token": "token-a", "topic": "news"})
    assert unsubscribe.status_code == 200
    assert unsubscribe.json() == {"updated_count": 1}

    subscriptions = client.get("/devices/subscriptions", params={"token": "token-a"}).json()
    assert subscriptions["subscriptions"] == []


def test_subscribe_unregistered_device_returns_404(client: TestClient) -> None:
    response = client.post("/topics/subscribe", json={"token": "missing", "topic": "news"})

    assert response.status_code == 404
    assert "register your device first" in response.json()["detail"]
    assert client.get("/topics/").json() == []


def test_unsubscribe_unknown_topic_returns_404(client: TestClient) -> None:
    _register(client, "token-a")

    response = client.post("/topics/unsubscribe", json={"token": "token-a", "topic": "nope"})

    assert response.status_code == 404


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}
