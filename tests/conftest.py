"""
tests.conftest

Shared fakes for the onboarding core.

Responsibilities:
- Call-counting in-memory `Store`.
- Scripted `ServiceClient` whose responses are set per test.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field

import pytest

from maintainerd_onboard.onboarding.errors import ProjectNotFound, ServiceNotFound, StoreError
from maintainerd_onboard.onboarding.models import (
    ImportedRepos,
    InvitationOutcome,
    InvitationResult,
    MaintainerRef,
    ProjectRef,
    TeamRef,
)
from maintainerd_onboard.service_clients.errors import ServiceClientError

FOSSA_SERVICE_ID = 1


@dataclass
class FakeStore:
    projects: dict[str, ProjectRef] = field(default_factory=dict)
    maintainers: dict[int, list[MaintainerRef]] = field(default_factory=dict)
    teams: dict[tuple[int, int], TeamRef] = field(default_factory=dict)
    services: dict[str, int] = field(default_factory=lambda: {"fossa": FOSSA_SERVICE_ID})
    fail_create_service_team: bool = False
    created_service_teams: list[dict[str, object]] = field(default_factory=list)

    def add_project(
        self, project_id: int, name: str, handles: list[str]
    ) -> tuple[ProjectRef, list[MaintainerRef]]:
        project = ProjectRef(id=project_id, name=name)
        self.projects[name] = project
        self.maintainers[project_id] = [
            MaintainerRef(
                id=project_id * 100 + i,
                project_id=project_id,
                email=f"{h}@example.org",
                github_account=h,
            )
            for i, h in enumerate(handles)
        ]
        return project, self.maintainers[project_id]

    async def get_project_by_name(self, name: str) -> ProjectRef:
        if name not in self.projects:
            raise ProjectNotFound(name)
        return self.projects[name]

    async def get_maintainers_by_project(self, project_id: int) -> list[MaintainerRef]:
        return list(self.maintainers.get(project_id, []))

    async def get_service_id(self, name: str) -> int:
        if name not in self.services:
            raise ServiceNotFound(name)
        return self.services[name]

    async def get_service_team_by_project(
        self, project_id: int, service_id: int
    ) -> TeamRef | None:
        return self.teams.get((project_id, service_id))

    async def create_service_team(
        self,
        *,
        project_id: int,
        project_name: str,
        service_id: int,
        remote_team_id: int,
        remote_team_name: str,
    ) -> None:
        self.created_service_teams.append(
            {
                "project_id": project_id,
                "project_name": project_name,
                "service_id": service_id,
                "remote_team_id": remote_team_id,
                "remote_team_name": remote_team_name,
            }
        )
        if self.fail_create_service_team:
            raise StoreError("database is locked")
        self.teams[(project_id, service_id)] = TeamRef(id=remote_team_id, name=remote_team_name)


@dataclass
class FakeServiceClient:
    # Scripted responses; an exception instance is raised instead of returned.
    create_team_response: TeamRef | Exception = field(
        default_factory=lambda: TeamRef(id=7, name="team")
    )
    invitations: dict[str, InvitationResult | Exception] = field(default_factory=dict)
    imported: ImportedRepos | Exception = field(default_factory=lambda: ImportedRepos(count=0))
    # Optional per-email delay, used to force out-of-order completion.
    invitation_delay: Callable[[str], float] = lambda _email: 0.0

    create_team_calls: list[str] = field(default_factory=list)
    invitation_calls: list[str] = field(default_factory=list)
    fetch_calls: list[int] = field(default_factory=list)
    # Invitations currently awaiting a response, and the highest value seen.
    in_flight: int = 0
    peak_in_flight: int = 0

    @property
    def total_calls(self) -> int:
        return len(self.create_team_calls) + len(self.invitation_calls) + len(self.fetch_calls)

    async def create_team(self, name: str) -> TeamRef:
        self.create_team_calls.append(name)
        if isinstance(self.create_team_response, Exception):
            raise self.create_team_response
        return self.create_team_response

    async def send_invitation(self, email: str) -> InvitationResult:
        self.invitation_calls.append(email)
        self.in_flight += 1
        self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
        try:
            delay = self.invitation_delay(email)
            if delay:
                await asyncio.sleep(delay)
        finally:
            self.in_flight -= 1
        scripted = self.invitations.get(email, InvitationResult(InvitationOutcome.sent))
        if isinstance(scripted, Exception):
            raise scripted
        return scripted

    async def fetch_imported_repos(self, team_id: int) -> ImportedRepos:
        self.fetch_calls.append(team_id)
        if isinstance(self.imported, Exception):
            raise self.imported
        return self.imported


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def client() -> FakeServiceClient:
    return FakeServiceClient()


@pytest.fixture
def network_error() -> ServiceClientError:
    return ServiceClientError("POST /teams: All connection attempts failed")
