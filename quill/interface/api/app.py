"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from quill.interface.api.errors import register_error_handlers
from quill.interface.api.routes import comments, health, posts, search, tags, users
from quill.util.di.container import container_lifespan, create_container, setup_di
from quill.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        container: DI container to serve requests from; the production
            container is built from the environment when omitted

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    app_instance = FastAPI(
        title="Quill API",
        description="Backend API for Quill - posts, threaded comments, reactions, "
        "bookmarks and follows over a document store",
        version="0.1.0",
        lifespan=container_lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    register_error_handlers(app_instance)

    if container is None:
        # Settings are loaded from environment automatically
        container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(tags.router)
    app_instance.include_router(users.router)
    app_instance.include_router(search.router)

    return app_instance
