from fastapi import FastAPI

from .admin import router as admin_router
from .auth import router as auth_router
from .health import router as health_router
from .leaves import router as leaves_router
from .notifications import router as notifications_router
from .university_updates import router as university_updates_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(leaves_router)
    app.include_router(notifications_router)
    app.include_router(university_updates_router)
    app.include_router(admin_router)
