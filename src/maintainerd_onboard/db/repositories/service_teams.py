"""
maintainerd_onboard.db.repositories.service_teams

Repositories for `Service` and `ServiceTeam` entities.

Responsibilities:
- Resolve services by name.
- Look up and insert Project -> remote team mappings.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from maintainerd_onboard.db.models import Service, ServiceTeam


class ServiceRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, name: str, description: str = "") -> Service:
        svc = Service(name=name, description=description)
        self._session.add(svc)
        await self._session.flush()
        return svc

    async def get_by_name(self, name: str) -> Service | None:
        stmt = select(Service).where(Service.name == name)
        return (await self._session.execute(stmt)).scalar_one_or_none()


class ServiceTeamRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_for_project(self, *, project_id: int, service_id: int) -> ServiceTeam | None:
        stmt = select(ServiceTeam).where(
            ServiceTeam.project_id == project_id, ServiceTeam.service_id == service_id
        )
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def create(
        self,
        *,
        project_id: int,
        service_id: int,
        service_team_id: int,
        service_team_name: str,
    ) -> ServiceTeam:
        st = ServiceTeam(
            project_id=project_id,
            service_id=service_id,
            service_team_id=service_team_id,
            service_team_name=service_team_name,
        )
        self._session.add(st)
        await self._session.flush()
        return st
