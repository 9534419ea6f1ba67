"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from linkup.config import Settings
from linkup.interface.api.errors import register_exception_handlers
from linkup.interface.api.routes import (
    admin,
    auth,
    comments,
    follow,
    health,
    notifications,
    posts,
    profile,
)
from linkup.util.di.container import create_container, setup_di
from linkup.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; tests pass one built from mock
            providers. Defaults to the production container.
    """
    settings = Settings()

    # Instrument httpx for outbound HTTP requests (ImgBB, identity provider)
    instrument_httpx()

    app_instance = FastAPI(
        title="LinkUp API",
        description="Backend API for LinkUp - posts, follows, likes, comments and notifications",
        version="1.0.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_exception_handlers(app_instance)

    # Setup dependency injection
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    for router in (
        auth.router,
        profile.router,
        follow.router,
        posts.router,
        comments.router,
        notifications.router,
        admin.router,
    ):
        app_instance.include_router(router, prefix=settings.api.prefix)

    return app_instance
