"""
maintainerd_onboard.onboarding.errors

Domain exceptions for the onboarding core.

Responsibilities:
- Precondition errors that abort a pass before any remote call.
- Store write errors that the Reconciler downgrades to drift warnings.
"""

from __future__ import annotations


class OnboardingError(Exception):
    pass


class PreconditionError(OnboardingError):
    """Local state makes reconciliation meaningless; raised to the caller."""


class ProjectNotFound(PreconditionError):
    def __init__(self, project_name: str) -> None:
        super().__init__(f"project '{project_name}' not found")
        self.project_name = project_name


class NoMaintainers(PreconditionError):
    def __init__(self, project_name: str) -> None:
        super().__init__(f"no maintainers found for project '{project_name}'")
        self.project_name = project_name


class ServiceNotFound(PreconditionError):
    def __init__(self, service_name: str) -> None:
        super().__init__(f"service '{service_name}' not found")
        self.service_name = service_name


class StoreError(OnboardingError):
    pass
