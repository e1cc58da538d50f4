"""
maintainerd_onboard.onboarding.reconciler

Onboarding reconciliation for a single project.

Responsibilities:
- Enforce the "at least one maintainer" precondition before any remote call.
- Provision the project's team on the Service once, and record the mapping locally.
- Invite every maintainer independently (bounded concurrency, stable report order).
- Report the team's imported-repo status.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from maintainerd_onboard.observability.logging import get_logger
from maintainerd_onboard.onboarding.errors import NoMaintainers, StoreError
from maintainerd_onboard.onboarding.messages import ReportMessages
from maintainerd_onboard.onboarding.models import (
    InvitationOutcome,
    InvitationResult,
    MaintainerRef,
    PassOutcome,
    ProjectRef,
    ReconciliationAction,
    ReconciliationResult,
    TeamRef,
)
from maintainerd_onboard.onboarding.ports import ServiceClient, Store
from maintainerd_onboard.service_clients.errors import ServiceClientError

log = get_logger(__name__)


class Reconciler:
    def __init__(
        self,
        *,
        client: ServiceClient,
        store: Store,
        service_id: int,
        messages: ReportMessages | None = None,
        invitation_concurrency: int = 4,
    ) -> None:
        self._client = client
        self._store = store
        self._service_id = service_id
        self._messages = messages or ReportMessages()
        self._invitation_concurrency = max(1, invitation_concurrency)

    async def reconcile(
        self,
        project: ProjectRef,
        maintainers: Sequence[MaintainerRef],
        existing_team: TeamRef | None,
    ) -> ReconciliationResult:
        """
        Run one pass. Raises `NoMaintainers` (no remote calls made); every remote
        failure is reported in the returned actions instead of being raised.
        """

        if not maintainers:
            raise NoMaintainers(project.name)

        result = ReconciliationResult(outcome=PassOutcome.completed)

        team = await self._ensure_team(project, existing_team, result.actions)
        if team is None:
            result.outcome = PassOutcome.team_unavailable
            return result
        result.team = team

        result.invitations = await self._invite_all(maintainers)
        for maintainer, invitation in result.invitations:
            result.actions.append(self._invitation_action(maintainer, invitation))

        result.actions.append(await self._imported_repos_action(project, team))
        return result

    async def _ensure_team(
        self,
        project: ProjectRef,
        existing_team: TeamRef | None,
        actions: list[ReconciliationAction],
    ) -> TeamRef | None:
        m = self._messages
        if existing_team is not None:
            actions.append(ReconciliationAction.ok(m.team_exists(existing_team)))
            return existing_team

        try:
            team = await self._client.create_team(project.name)
        except ServiceClientError as e:
            log.warning("team_creation_failed", project=project.name, error=str(e))
            actions.append(ReconciliationAction.error(m.team_creation_failed(project, str(e))))
            return None

        log.info("team_created", project=project.name, remote_team_id=team.id)
        actions.append(ReconciliationAction.ok(m.team_created(team)))

        try:
            await self._store.create_service_team(
                project_id=project.id,
                project_name=project.name,
                service_id=self._service_id,
                remote_team_id=team.id,
                remote_team_name=team.name,
            )
        except StoreError as e:
            # Remote team exists but the local mirror does not: drift.
            log.warning(
                "service_team_drift",
                project=project.name,
                remote_team_id=team.id,
                error=str(e),
            )
            actions.append(ReconciliationAction.warning(m.team_not_recorded(project, team, str(e))))
        return team

    async def _invite_all(
        self, maintainers: Sequence[MaintainerRef]
    ) -> list[tuple[MaintainerRef, InvitationResult]]:
        sem = asyncio.Semaphore(self._invitation_concurrency)

        async def _invite(m: MaintainerRef) -> InvitationResult:
            async with sem:
                try:
                    return await self._client.send_invitation(m.email)
                except ServiceClientError as e:
                    return InvitationResult.failure(str(e))

        # gather() returns results in argument order regardless of completion order.
        results = await asyncio.gather(*(_invite(m) for m in maintainers))
        return list(zip(maintainers, results, strict=True))

    def _invitation_action(
        self, maintainer: MaintainerRef, invitation: InvitationResult
    ) -> ReconciliationAction:
        m = self._messages
        if invitation.outcome is InvitationOutcome.sent:
            return ReconciliationAction.ok(m.invitation_sent(maintainer))
        if invitation.outcome is InvitationOutcome.already_pending:
            return ReconciliationAction.ok(m.invitation_pending(maintainer))
        if invitation.outcome is InvitationOutcome.already_member:
            # TODO: add existing FOSSA users to the project team once the client supports it.
            return ReconciliationAction.ok(m.already_member(maintainer))

        cause = invitation.cause or "unknown error"
        log.warning("invitation_failed", maintainer=maintainer.github_account, error=cause)
        return ReconciliationAction.warning(m.invitation_failed(maintainer, cause))

    async def _imported_repos_action(
        self, project: ProjectRef, team: TeamRef
    ) -> ReconciliationAction:
        m = self._messages
        try:
            imported = await self._client.fetch_imported_repos(team.id)
        except ServiceClientError as e:
            log.warning("imported_repos_unavailable", project=project.name, error=str(e))
            return ReconciliationAction.warning(m.imported_repos_unavailable(project, str(e)))

        if imported.count == 0:
            return ReconciliationAction.ok(m.no_imported_repos(project))
        return ReconciliationAction.ok(m.imported_repos(project, imported.count, imported.links))


# --- Module Notes -----------------------------------------------------------
# Team creation and the local mapping write are not atomic. A failed write is
# surfaced as a warning so operators can fix the mapping by hand.
