"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from votp.config import Settings
from votp.interface.api.routes import comments, health, users
from votp.util.di.container import create_container, setup_di
from votp.util.observability import instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="VOTP API",
        description="Comments on any web page, grouped by canonical URL",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # The browser extension calls from page origins with a bearer header
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,
    )

    container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(users.router)

    return app_instance


# Note: Logfire must be configured before this module is imported
app = create_app()
