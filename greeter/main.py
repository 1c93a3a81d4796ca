"""Greeter HTTP service application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from greeter.config import Settings, load_settings
from greeter.context import build_context
from greeter.api.routes_greeting import router as greeting_router
from greeter.api.routes_admin import router as admin_router

logger = logging.getLogger(__name__)


def configure_logging(level: str = "info"):
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    context = app.state.context
    logger.info(f"Greeter starting up: '{context.message().strip()}'")

    yield

    logger.info("Greeter shutting down...")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    The hostname is resolved here, once, so a failing lookup stops startup
    instead of surfacing on every request. Serve with
    ``uvicorn greeter.main:create_app --factory`` or ``python run.py``.
    """
    if settings is None:
        settings = load_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Greeter",
        description="Says hello from the host it runs on.",
        version="1.0.0",
        lifespan=lifespan,
        # Only the two routes below are served; everything else is a 404.
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.context = build_context(settings)

    app.include_router(greeting_router)
    app.include_router(admin_router)

    return app
