"""
maintainerd_onboard.onboarding.ports

Boundaries consumed by the reconciliation core.

Responsibilities:
- `Store`: read projects/maintainers/service teams, record newly created teams.
- `ServiceClient`: remote team, invitation and imported-repo operations.
"""

from __future__ import annotations

from typing import Protocol

from maintainerd_onboard.onboarding.models import (
    ImportedRepos,
    InvitationResult,
    MaintainerRef,
    ProjectRef,
    TeamRef,
)


class Store(Protocol):
    async def get_project_by_name(self, name: str) -> ProjectRef:
        """Raises `ProjectNotFound`."""
        ...

    async def get_maintainers_by_project(self, project_id: int) -> list[MaintainerRef]:
        """Maintainers in a stable order (ascending id)."""
        ...

    async def get_service_id(self, name: str) -> int:
        """Raises `ServiceNotFound`."""
        ...

    async def get_service_team_by_project(
        self, project_id: int, service_id: int
    ) -> TeamRef | None: ...

    async def create_service_team(
        self,
        *,
        project_id: int,
        project_name: str,
        service_id: int,
        remote_team_id: int,
        remote_team_name: str,
    ) -> None:
        """Raises `StoreError`."""
        ...


class ServiceClient(Protocol):
    # Every method raises `ServiceClientError` on transport/HTTP failure (timeouts included).

    async def create_team(self, name: str) -> TeamRef: ...

    async def send_invitation(self, email: str) -> InvitationResult: ...

    async def fetch_imported_repos(self, team_id: int) -> ImportedRepos: ...
