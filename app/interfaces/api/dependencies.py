"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, Request, status

from app.application.use_cases.notifications import DispatchEngine
from app.config import get_settings
from app.infrastructure.push import DeliveryChannel


def get_delivery_channel(request: Request) -> DeliveryChannel:
    """Return the delivery channel built by the application lifespan."""

    channel = getattr(request.app.state, "delivery_channel", None)
    if channel is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Delivery channel is not configured",
        )
    return channel


def get_dispatch_engine(
    channel: DeliveryChannel = Depends(get_delivery_channel),
) -> DispatchEngine:
    return DispatchEngine(channel, get_settings())
