import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import configure_logging, get_settings
from app.infrastructure.database import engine, initialize_database
from app.infrastructure.push import DeliveryChannel, build_delivery_channel
from app.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


def create_app(delivery_channel: DeliveryChannel | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    ``delivery_channel`` replaces the channel selected by the settings; it is
    left open on shutdown because the caller owns it.
    """

    settings = get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Prepare the database and delivery channel, then release them on exit."""

        initialize_database()
        owns_channel = delivery_channel is None
        channel = build_delivery_channel(settings) if owns_channel else delivery_channel
        app.state.delivery_channel = channel
        logger.info("Using %s delivery channel", type(channel).__name__)
        try:
            yield
        finally:
            app.state.delivery_channel = None
            if owns_channel:
                channel.close()
            engine.dispose()

    app = FastAPI(title="pushdispatch", version="0.1.0", lifespan=lifespan)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_routes(app)
    return app


app = create_app()
