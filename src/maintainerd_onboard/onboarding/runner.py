"""
maintainerd_onboard.onboarding.runner

Drives one reconciliation pass for a named project.

Responsibilities:
- Load the project, its maintainers and existing team mapping from the Store.
- Invoke the Reconciler and render its actions as report lines.
- Let precondition errors propagate; never pair a report with an error.
"""

from __future__ import annotations

from maintainerd_onboard.observability.logging import get_logger
from maintainerd_onboard.onboarding.models import ReconciliationResult
from maintainerd_onboard.onboarding.ports import Store
from maintainerd_onboard.onboarding.reconciler import Reconciler

log = get_logger(__name__)


class Runner:
    def __init__(self, *, store: Store, reconciler: Reconciler, service_id: int) -> None:
        self._store = store
        self._reconciler = reconciler
        self._service_id = service_id

    async def run(self, project_name: str) -> list[str]:
        return (await self.run_pass(project_name)).render()

    async def run_pass(self, project_name: str) -> ReconciliationResult:
        project = await self._store.get_project_by_name(project_name)
        maintainers = await self._store.get_maintainers_by_project(project.id)
        log.info("maintainers_loaded", project=project.name, count=len(maintainers))

        existing_team = await self._store.get_service_team_by_project(project.id, self._service_id)
        result = await self._reconciler.reconcile(project, maintainers, existing_team)

        log.info(
            "onboarding_pass_complete",
            project=project.name,
            outcome=result.outcome.value,
            actions=len(result.actions),
        )
        return result
