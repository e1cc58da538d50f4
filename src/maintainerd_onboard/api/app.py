"""
maintainerd_onboard.api.app

FastAPI app factory for the onboarding service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Initialize and dispose shared infrastructure (DB engine, FOSSA HTTP client).
"""

from __future__ import annotations

import httpx
from fastapi import FastAPI

from maintainerd_onboard import __version__
from maintainerd_onboard.api.routers.health import router as health_router
from maintainerd_onboard.api.routers.onboarding import router as onboarding_router
from maintainerd_onboard.db.init_db import init_db
from maintainerd_onboard.db.session import create_engine, create_sessionmaker
from maintainerd_onboard.observability.logging import configure_logging, get_logger
from maintainerd_onboard.observability.middleware import RequestContextMiddleware
from maintainerd_onboard.service_clients.fossa import create_http_client
from maintainerd_onboard.settings import Settings

log = get_logger(__name__)


def create_app(
    *,
    settings: Settings,
    fossa_transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    app = FastAPI(
        title="maintainerd onboarding",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(onboarding_router)

    @app.on_event("startup")
    async def _startup() -> None:
        log.info("startup", env=settings.env, target_service=settings.target_service)
        if not settings.fossa_api_token:
            log.warning("fossa_api_token_missing")
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        # One pooled client for all passes; the transport hook lets tests stub FOSSA.
        app.state.fossa_http = create_http_client(settings, transport=fossa_transport)
        if settings.env in ("dev", "test"):
            await init_db(engine)

    @app.on_event("shutdown")
    async def _shutdown() -> None:
        http = getattr(app.state, "fossa_http", None)
        if http is not None:
            await http.aclose()
        engine = getattr(app.state, "engine", None)
        if engine is not None:
            await engine.dispose()
        log.info("shutdown")

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; reconciliation logic lives in `onboarding`.
