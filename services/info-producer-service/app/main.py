# services/info-producer-service/app/main.py
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.responses import ORJSONResponse

from app.config import settings
from app.infra.logging import setup_logging
from app.core.catalog import refresh_catalog
from app.core.registry import get_registry
from app.clients.http_utils import close_http_clients
from app.services.registration_service import register_with_coordinator
from app.api.routers import callback_routes, health_routes

logger = logging.getLogger("app.main")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    App lifespan:
      - configure logging
      - load the type catalog into the job registry
      - register types + producer with the coordinator
      - graceful shutdown: HTTP clients
    """
    setup_logging(settings.service_name, settings.log_level)
    logger.info("%s starting up", settings.service_name)

    try:
        registry = get_registry()
        types = refresh_catalog(registry, settings.types_dir)
        await register_with_coordinator(registry, types)
        yield
    finally:
        try:
            await close_http_clients()
        except Exception:
            logger.warning("Error closing HTTP clients", exc_info=True)

        logger.info("%s shutdown complete", settings.service_name)


app = FastAPI(
    title="Information Producer Service",
    description="Advertises schema-defined information types and admits jobs for them",
    version=settings.service_version,
    default_response_class=ORJSONResponse,
    lifespan=lifespan,
)

app.include_router(health_routes.router)
app.include_router(callback_routes.router)
