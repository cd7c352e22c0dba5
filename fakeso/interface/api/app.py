"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from fakeso.interface.api.routes import answers, health, questions, tags
from fakeso.interface.error import register_error_handlers
from fakeso.util.di.container import create_container, setup_di
from fakeso.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container by default

    Returns:
        Configured application
    """
    app_instance = FastAPI(
        title="Fake Stack Overflow API",
        description="Questions, answers, votes and comments with tag search",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(questions.router)
    app_instance.include_router(answers.router)
    app_instance.include_router(tags.router)

    return app_instance
