"""
maintainerd_onboard.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness check (`/healthz`).
- Provide readiness check (`/readyz`): the FOSSA token is configured, the database
  answers, and the target service is registered in it.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from maintainerd_onboard.api.deps import db_session, settings_dep
from maintainerd_onboard.db.repositories.service_teams import ServiceRepo
from maintainerd_onboard.settings import Settings

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(settings_dep),
) -> dict[str, str]:
    # Without a token every FOSSA call fails; keep the pod out of rotation instead.
    if not settings.fossa_api_token:
        raise HTTPException(
            status_code=HTTP_503_SERVICE_UNAVAILABLE, detail="FOSSA_API_TOKEN is not set"
        )
    await session.execute(text("SELECT 1"))
    if await ServiceRepo(session).get_by_name(settings.target_service) is None:
        raise HTTPException(
            status_code=HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"service '{settings.target_service}' is not registered",
        )
    return {"status": "ready"}


# --- Module Notes -----------------------------------------------------------
# /healthz stays dependency-free so a missing token never restarts the process.
