"""Shared fixtures: a throwaway SQLite database and an in-memory delivery channel."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

from fastapi.testclient import TestClient

TEST_DB_PATH = Path(tempfile.gettempdir()) / "pushdispatch_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["DELIVERY_CHANNEL"] = "fake"
os.environ["APP_TIMEZONE"] = "UTC"

from app.config import get_settings  # noqa: E402

get_settings.cache_clear()

from app.application.use_cases.devices import register_device  # noqa: E402
from app.application.use_cases.notifications import DispatchEngine  # noqa: E402
from app.domain.entities import DeviceToken  # noqa: E402
from app.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from app.infrastructure.push import FakeDeliveryChannel  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure every test starts from empty tables."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    with SessionLocal() as db:
        yield db


@pytest.fixture()
def channel() -> FakeDeliveryChannel:
    return FakeDeliveryChannel()


@pytest.fixture()
def dispatch_engine(channel: FakeDeliveryChannel) -> DispatchEngine:
    return DispatchEngine(channel, get_settings())


@pytest.fixture()
def client(channel: FakeDeliveryChannel):
    """Return a test client whose application delivers through ``channel``."""

    from main import create_app

    app = create_app(delivery_channel=channel)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_device(session):
    """Register a device and optionally deactivate it afterwards."""

    from app.application.use_cases.devices import deactivate_device

    def _make_device(
        token: str,
        *,
        platform: str = "android",
        user_id: str | None = None,
        active: bool = True,
    ) -> DeviceToken:
        device = register_device(
            session, token=token, platform=platform, user_id=user_id
        ).device
        if not active:
            device = deactivate_device(session, token=token)
        return device

    return _make_device
