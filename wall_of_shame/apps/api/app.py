"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from wall_of_shame import WALL_OF_SHAME_VERSION
from wall_of_shame.apps.api.middleware import CorrelationIdMiddleware
from wall_of_shame.core.config import config
from wall_of_shame.core.logging import get_logger
from wall_of_shame.services import ServiceContainer, runtime

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup/shutdown and make sure the runtime registry is populated."""
    logger.info("Initializing wall of shame skill engine...")
    services = getattr(app.state, "services", None)
    if isinstance(services, ServiceContainer):
        runtime.set_services(services)
    if not config.SKILL_APPLICATION_IDS:
        logger.warning("application id allow-list is empty; accepting every skill request")
    logger.info("wall of shame ready.")
    try:
        yield
    finally:
        logger.info("wall of shame shutting down.")


def create_app(services: ServiceContainer | None = None) -> FastAPI:
    """Build the FastAPI application with configured routers."""
    if services is None:
        raise RuntimeError("Service container must be provided when creating the app.")
    app = FastAPI(title="Wall of Shame", version=WALL_OF_SHAME_VERSION, lifespan=lifespan)
    app.state.services = services
    runtime.set_services(services)
    app.add_middleware(CorrelationIdMiddleware)

    from .routes import health, skill  # pylint: disable=import-outside-toplevel

    app.include_router(health.router)
    app.include_router(skill.router)
    return app


__all__ = ["create_app", "lifespan"]
