"""
FastAPI application entry point.
Challenge: Mount routes, error envelopes, Prometheus metrics, logging on startup.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_client import make_asgi_app

from inventory.api.errors import register_exception_handlers
from inventory.api.v1.router import api_router
from inventory.config import get_settings
from inventory.core.logging import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: configure logging. Shutdown: dispose the engine's pool."""
    from inventory.db.session import engine

    settings = get_settings()
    configure_logging(settings.log_level, json=settings.log_json)
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        description="Denormalized item listings built with two interchangeable query strategies.",
        version="1.0.0",
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    # Prometheus metrics at /metrics (listing timings per strategy/engine)
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
