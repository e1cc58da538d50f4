"""
maintainerd_onboard.db.repositories.projects

Repositories for `Project` and `Maintainer` entities.

Responsibilities:
- Look up projects by their unique name.
- List a project's maintainers in a stable order.
- Insert rows for tests and local seeding (maintainerd owns these tables in production).
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from maintainerd_onboard.db.models import Maintainer, Project


class ProjectRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, name: str) -> Project:
        project = Project(name=name)
        self._session.add(project)
        await self._session.flush()
        return project

    async def get_by_name(self, name: str) -> Project | None:
        stmt = select(Project).where(Project.name == name)
        return (await self._session.execute(stmt)).scalar_one_or_none()


class MaintainerRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(
        self, *, project_id: int, email: str, github_account: str, name: str = ""
    ) -> Maintainer:
        m = Maintainer(project_id=project_id, email=email, github_account=github_account, name=name)
        self._session.add(m)
        await self._session.flush()
        return m

    async def list_for_project(self, project_id: int) -> list[Maintainer]:
        # Ordered by id so reports are reproducible between passes.
        stmt = select(Maintainer).where(Maintainer.project_id == project_id).order_by(Maintainer.id)
        return list((await self._session.execute(stmt)).scalars().all())


# --- Module Notes -----------------------------------------------------------
# Maintainer order is part of the report contract; keep `list_for_project` ordered.
