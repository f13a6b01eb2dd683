from fastapi import FastAPI

from .devices import router as devices_router
from .health import router as health_router
from .notifications import router as notifications_router
from .preferences import router as preferences_router
from .topics import router as topics_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(health_router)
    app.include_router(devices_router)
    app.include_router(topics_router)
    app.include_router(notifications_router)
    app.include_router(preferences_router)
