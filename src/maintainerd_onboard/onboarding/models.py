"""
maintainerd_onboard.onboarding.models

Value types used by the reconciliation core.

Responsibilities:
- Immutable snapshots of Store entities (project, maintainer, service team).
- Typed outcomes of ServiceClient calls.
- Report entries (`ReconciliationAction`) and the per-pass result.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class ProjectRef:
    id: int
    name: str


@dataclass(frozen=True, slots=True)
class MaintainerRef:
    id: int
    project_id: int
    email: str
    github_account: str
    name: str = ""


@dataclass(frozen=True, slots=True)
class TeamRef:
    # Identity of a team on the remote service.
    id: int
    name: str


@dataclass(frozen=True, slots=True)
class ImportedRepos:
    count: int
    links: tuple[str, ...] = ()


class Severity(enum.StrEnum):
    ok = "ok"
    warning = "warning"
    error = "error"


# Markers follow the Slack/GitHub shortcodes used in maintainerd reports.
_SEVERITY_MARKERS: dict[Severity, str] = {
    Severity.ok: "✅",
    Severity.warning: ":warning:",
    Severity.error: ":x:",
}


@dataclass(frozen=True, slots=True)
class ReconciliationAction:
    severity: Severity
    message: str

    @classmethod
    def ok(cls, message: str) -> ReconciliationAction:
        return cls(Severity.ok, message)

    @classmethod
    def warning(cls, message: str) -> ReconciliationAction:
        return cls(Severity.warning, message)

    @classmethod
    def error(cls, message: str) -> ReconciliationAction:
        return cls(Severity.error, message)

    def render(self) -> str:
        return f"{_SEVERITY_MARKERS[self.severity]} {self.message}"


class InvitationOutcome(enum.StrEnum):
    sent = "sent"
    already_pending = "already_pending"
    already_member = "already_member"
    failed = "failed"


@dataclass(frozen=True, slots=True)
class InvitationResult:
    outcome: InvitationOutcome
    cause: str | None = None

    @classmethod
    def failure(cls, cause: str) -> InvitationResult:
        return cls(InvitationOutcome.failed, cause)


class PassOutcome(enum.StrEnum):
    # All three steps ran (individual remote failures may still be reported).
    completed = "completed"
    # Team could not be provisioned; invitations and repo status were skipped.
    team_unavailable = "team_unavailable"


@dataclass(slots=True)
class ReconciliationResult:
    """
    Result of one reconciliation pass.

    `invitations` keeps the per-maintainer outcome so callers can follow up on
    `already_member` maintainers (e.g. add them to the team) without parsing messages.
    """

    outcome: PassOutcome
    actions: list[ReconciliationAction] = field(default_factory=list)
    team: TeamRef | None = None
    invitations: list[tuple[MaintainerRef, InvitationResult]] = field(default_factory=list)

    def render(self) -> list[str]:
        return [a.render() for a in self.actions]
