"""
tests.test_runner

End-to-end reconciliation passes through the Runner (fake store + fake service).

Responsibilities:
- Scenario coverage: existing team, unknown project, team creation failure.
- Precondition errors propagate without a report.
"""

from __future__ import annotations

import pytest

from maintainerd_onboard.onboarding.errors import NoMaintainers, ProjectNotFound
from maintainerd_onboard.onboarding.models import (
    ImportedRepos,
    InvitationOutcome,
    InvitationResult,
    TeamRef,
)
from maintainerd_onboard.onboarding.reconciler import Reconciler
from maintainerd_onboard.onboarding.runner import Runner


def _runner(client, store) -> Runner:
    reconciler = Reconciler(client=client, store=store, service_id=1)
    return Runner(store=store, reconciler=reconciler, service_id=1)


@pytest.mark.asyncio
async def test_envoy_with_existing_team(client, store) -> None:
    store.add_project(1, "envoy", ["member", "newcomer"])
    store.teams[(1, 1)] = TeamRef(id=42, name="envoy")
    client.invitations["member@example.org"] = InvitationResult(InvitationOutcome.already_member)
    client.invitations["newcomer@example.org"] = InvitationResult(InvitationOutcome.sent)
    client.imported = ImportedRepos(count=0, links=())

    report = await _runner(client, store).run("envoy")

    assert len(report) == 4
    assert report[0].startswith("✅ 👥 [envoy team]") and "was already in FOSSA" in report[0]
    assert report[1].startswith("✅ @member ") and "already a CNCF FOSSA user" in report[1]
    assert report[2].startswith("✅ @newcomer ") and "within 48 hours" in report[2]
    assert report[3] == "✅ The envoy project has not yet imported repos"
    assert client.create_team_calls == []


@pytest.mark.asyncio
async def test_unknown_project_raises_not_found(client, store) -> None:
    store.add_project(1, "envoy", ["alice"])

    with pytest.raises(ProjectNotFound, match="unknown-proj"):
        await _runner(client, store).run("unknown-proj")

    assert client.total_calls == 0


@pytest.mark.asyncio
async def test_project_without_maintainers_propagates(client, store) -> None:
    store.add_project(2, "orphan", [])

    with pytest.raises(NoMaintainers):
        await _runner(client, store).run("orphan")

    assert client.total_calls == 0


@pytest.mark.asyncio
async def test_team_creation_failure_yields_single_error_line(
    client, store, network_error
) -> None:
    store.add_project(3, "keda", ["alice", "bob"])
    client.create_team_response = network_error

    report = await _runner(client, store).run("keda")

    assert len(report) == 1
    assert report[0].startswith(":x: Problem creating team on FOSSA for keda")
    assert "All connection attempts failed" in report[0]


@pytest.mark.asyncio
async def test_new_project_reports_creation_then_invites_then_repos(client, store) -> None:
    store.add_project(4, "flux", ["a", "b"])
    client.create_team_response = TeamRef(id=11, name="flux")
    client.invitations["b@example.org"] = InvitationResult.failure("HTTP 400: invalid email")
    client.imported = ImportedRepos(count=1, links=("[flux](https://app.fossa.com/projects/x)",))

    report = await _runner(client, store).run("flux")

    assert [line.split(" ", 1)[0] for line in report] == ["✅", "✅", ":warning:", "✅"]
    assert "has been created in FOSSA" in report[0]
    assert report[3].endswith("imported 1 repo(s)<BR>[flux](https://app.fossa.com/projects/x)")
    assert await store.get_service_team_by_project(4, 1) == TeamRef(id=11, name="flux")
