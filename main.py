import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from leaveflow.config import get_settings
from leaveflow.infrastructure.database import engine, initialize_database
from leaveflow.infrastructure.notifications import (
    ConnectionRegistry,
    EventDispatcher,
    NotificationPublisher,
)
from leaveflow.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema on startup and release pooled connections on shutdown."""

    initialize_database()
    yield
    for connection in app.state.connection_registry.all():
        app.state.event_dispatcher.disconnect(connection.connection_id)
    engine.dispose()


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""

    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(title="LeaveFlow API", lifespan=lifespan)

    # Allows requests from the browser client.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    registry = ConnectionRegistry()
    dispatcher = EventDispatcher(registry)
    app.state.connection_registry = registry
    app.state.event_dispatcher = dispatcher
    app.state.notification_publisher = NotificationPublisher(dispatcher)

    register_routes(app)
    return app


app = create_app()
