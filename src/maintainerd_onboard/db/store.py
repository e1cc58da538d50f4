"""
maintainerd_onboard.db.store

SQLAlchemy-backed implementation of the onboarding `Store` boundary.

Responsibilities:
- Translate ORM rows into immutable `onboarding.models` snapshots.
- Map "row missing" to precondition errors and write failures to `StoreError`.
"""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from maintainerd_onboard.db.models import Maintainer, Project
from maintainerd_onboard.db.repositories.projects import MaintainerRepo, ProjectRepo
from maintainerd_onboard.db.repositories.service_teams import ServiceRepo, ServiceTeamRepo
from maintainerd_onboard.observability.logging import get_logger
from maintainerd_onboard.onboarding.errors import ProjectNotFound, ServiceNotFound, StoreError
from maintainerd_onboard.onboarding.models import MaintainerRef, ProjectRef, TeamRef

log = get_logger(__name__)


class SqlStore:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._projects = ProjectRepo(session)
        self._maintainers = MaintainerRepo(session)
        self._services = ServiceRepo(session)
        self._service_teams = ServiceTeamRepo(session)

    async def get_project_by_name(self, name: str) -> ProjectRef:
        project = await self._projects.get_by_name(name)
        if project is None:
            raise ProjectNotFound(name)
        return _project_ref(project)

    async def get_maintainers_by_project(self, project_id: int) -> list[MaintainerRef]:
        return [_maintainer_ref(m) for m in await self._maintainers.list_for_project(project_id)]

    async def get_service_id(self, name: str) -> int:
        svc = await self._services.get_by_name(name)
        if svc is None:
            raise ServiceNotFound(name)
        return svc.id

    async def get_service_team_by_project(
        self, project_id: int, service_id: int
    ) -> TeamRef | None:
        st = await self._service_teams.get_for_project(
            project_id=project_id, service_id=service_id
        )
        if st is None:
            return None
        return TeamRef(id=st.service_team_id, name=st.service_team_name)

    async def create_service_team(
        self,
        *,
        project_id: int,
        project_name: str,
        service_id: int,
        remote_team_id: int,
        remote_team_name: str,
    ) -> None:
        try:
            # SAVEPOINT keeps the outer session usable if the insert is rejected.
            async with self._session.begin_nested():
                await self._service_teams.create(
                    project_id=project_id,
                    service_id=service_id,
                    service_team_id=remote_team_id,
                    service_team_name=remote_team_name,
                )
        except SQLAlchemyError as e:
            log.warning(
                "service_team_insert_failed",
                project=project_name,
                remote_team_id=remote_team_id,
                error=str(e),
            )
            raise StoreError(
                f"failed to record service team {remote_team_id} for project '{project_name}': {e}"
            ) from e


def _project_ref(p: Project) -> ProjectRef:
    return ProjectRef(id=p.id, name=p.name)


def _maintainer_ref(m: Maintainer) -> MaintainerRef:
    return MaintainerRef(
        id=m.id,
        project_id=m.project_id,
        email=m.email,
        github_account=m.github_account,
        name=m.name,
    )


# --- Module Notes -----------------------------------------------------------
# Commit is owned by `services.onboarding_service`; this class only flushes.
