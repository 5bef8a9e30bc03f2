"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vent.config import Settings
from vent.interface.api.routes import (
    anonymous,
    comments,
    health,
    posts,
    users,
    votes,
)
from vent.interface.error import register_error_handlers
from vent.util.di.container import create_container, setup_di
from vent.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function;
    scripts/start_app.py handles this in production.

    Args:
        container: DI container to serve requests from (production container if None)
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Vent API",
        description="Backend API for Vent - anonymous frustrations, ranked by votes",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",
            "http://localhost:5173",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(anonymous.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(users.router)

    return app_instance
