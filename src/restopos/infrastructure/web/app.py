"""FastAPI application factory.

Usage:
    uvicorn restopos.infrastructure.web.app:create_app --factory

or ``restopos serve``.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from restopos.infrastructure.bootstrap import Services, build_services
from restopos.infrastructure.config import Settings, get_settings
from restopos.infrastructure.persistence.codec import format_timestamp
from restopos.infrastructure.web import auth, bills, menu, orders, realtime, reports
from restopos.infrastructure.web.errors import register_exception_handlers
from restopos.infrastructure.web.middleware import RequestIdMiddleware

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, services: Services | None = None) -> FastAPI:
    settings = settings or get_settings()
    services = services or build_services(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting %s %s", settings.app_name, settings.app_version)
        logger.info(
            "Store: %s | transitions enforced: %s | tax rate: %s",
            services.database.path or "in-memory",
            settings.enforce_transitions,
            settings.tax_rate,
        )
        yield
        logger.info("Shutting down, closing %d realtime session(s)", services.hub.session_count)
        await services.hub.close_all()

    app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)
    app.state.services = services

    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(auth.router)
    app.include_router(menu.router)
    app.include_router(orders.router)
    app.include_router(bills.router)
    app.include_router(reports.router)
    app.include_router(realtime.router)

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str | None]:
        return {"status": "OK", "timestamp": format_timestamp(datetime.now(timezone.utc))}

    return app
