"""
maintainerd_onboard.services.onboarding_service

Onboarding pass service (transaction + composition owner).

Responsibilities:
- Build the SQL store, FOSSA client, Reconciler and Runner for one pass.
- Resolve the configured target service before any remote call.
- Commit the session once the pass finishes.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx
from sqlalchemy.ext.asyncio import AsyncSession

from maintainerd_onboard.db.store import SqlStore
from maintainerd_onboard.observability.logging import get_logger, pass_context
from maintainerd_onboard.onboarding.messages import ReportMessages
from maintainerd_onboard.onboarding.models import PassOutcome
from maintainerd_onboard.onboarding.reconciler import Reconciler
from maintainerd_onboard.onboarding.runner import Runner
from maintainerd_onboard.service_clients.fossa import FossaClient
from maintainerd_onboard.settings import Settings

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class OnboardingResult:
    project: str
    service: str
    outcome: PassOutcome
    report: list[str]


class OnboardingService:
    def __init__(
        self,
        *,
        session: AsyncSession,
        settings: Settings,
        http: httpx.AsyncClient,
    ) -> None:
        self._session = session
        self._settings = settings
        self._http = http

    async def onboard(self, project_name: str) -> OnboardingResult:
        service_name = self._settings.target_service
        with pass_context(project=project_name, target_service=service_name):
            store = SqlStore(self._session)
            service_id = await store.get_service_id(service_name)

            reconciler = Reconciler(
                client=FossaClient(settings=self._settings, http=self._http),
                store=store,
                service_id=service_id,
                messages=ReportMessages.from_settings(self._settings),
                invitation_concurrency=self._settings.invitation_concurrency,
            )
            runner = Runner(store=store, reconciler=reconciler, service_id=service_id)

            try:
                result = await runner.run_pass(project_name)
            except Exception:
                await self._session.rollback()
                raise
            # Persists the team mapping written during the pass (if any).
            await self._session.commit()

            log.info("onboarding_committed", outcome=result.outcome.value)
            return OnboardingResult(
                project=project_name,
                service=service_name,
                outcome=result.outcome,
                report=result.render(),
            )
