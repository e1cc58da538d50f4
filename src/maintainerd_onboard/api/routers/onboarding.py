"""
maintainerd_onboard.api.routers.onboarding

Trigger endpoint for onboarding passes.

Responsibilities:
- Run one reconciliation pass for a project and return its report.
- Map precondition errors to HTTP status codes; remote problems stay in the report.
"""

from __future__ import annotations

import httpx
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import (
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_503_SERVICE_UNAVAILABLE,
)

from maintainerd_onboard.api.deps import db_session, fossa_http, settings_dep
from maintainerd_onboard.onboarding.errors import NoMaintainers, ProjectNotFound, ServiceNotFound
from maintainerd_onboard.services.onboarding_service import OnboardingService
from maintainerd_onboard.settings import Settings

router = APIRouter(prefix="/v1/projects", tags=["onboarding"])


class OnboardingResponse(BaseModel):
    project: str
    service: str
    outcome: str
    report: list[str]


@router.post("/{project_name}/onboarding", response_model=OnboardingResponse)
async def onboard_project(
    project_name: str,
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(settings_dep),
    http: httpx.AsyncClient = Depends(fossa_http),
) -> OnboardingResponse:
    svc = OnboardingService(session=session, settings=settings, http=http)
    try:
        result = await svc.onboard(project_name)
    except ProjectNotFound as e:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail=str(e)) from e
    except NoMaintainers as e:
        raise HTTPException(status_code=HTTP_409_CONFLICT, detail=str(e)) from e
    except ServiceNotFound as e:
        # Misconfigured deployment (target service not seeded in the store).
        raise HTTPException(status_code=HTTP_503_SERVICE_UNAVAILABLE, detail=str(e)) from e

    return OnboardingResponse(
        project=result.project,
        service=result.service,
        outcome=result.outcome.value,
        report=result.report,
    )
