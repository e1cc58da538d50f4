"""
maintainerd_onboard.onboarding.messages

Report wording for reconciliation actions.

Responsibilities:
- Hold every human-readable message template in one place.
- Render team links and capped imported-repo listings.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from maintainerd_onboard.onboarding.models import MaintainerRef, ProjectRef, TeamRef
from maintainerd_onboard.settings import Settings


@dataclass(frozen=True, slots=True)
class ReportMessages:
    service_label: str = "FOSSA"
    org_label: str = "CNCF"
    team_url_template: str = "https://app.fossa.com/account/settings/organization/teams/{team_id}"
    invitation_window_hours: int = 48
    max_listed_repos: int = 10

    @classmethod
    def from_settings(cls, settings: Settings) -> ReportMessages:
        app_url = settings.fossa_app_url.rstrip("/")
        return cls(
            service_label=settings.target_service.upper(),
            team_url_template=app_url + "/account/settings/organization/teams/{team_id}",
            invitation_window_hours=settings.invitation_window_hours,
            max_listed_repos=settings.max_listed_repos,
        )

    def _team_link(self, team: TeamRef) -> str:
        return f"[{team.name} team]({self.team_url_template.format(team_id=team.id)})"

    def team_exists(self, team: TeamRef) -> str:
        return f"👥 {self._team_link(team)} was already in {self.service_label}"

    def team_created(self, team: TeamRef) -> str:
        return f"👥 {self._team_link(team)} has been created in {self.service_label}"

    def team_not_recorded(self, project: ProjectRef, team: TeamRef, cause: str) -> str:
        return (
            f"{project.name} team {team.id} was created in {self.service_label} but could not "
            f"be recorded in maintainer-d ({cause}); the next pass will try to create it "
            "again, reconcile manually"
        )

    def team_creation_failed(self, project: ProjectRef, cause: str) -> str:
        return f"Problem creating team on {self.service_label} for {project.name}: {cause}"

    def _accept_guidance(self) -> str:
        return (
            "Please check your registered email and accept the invitation within "
            f"{self.invitation_window_hours} hours."
        )

    def invitation_sent(self, m: MaintainerRef) -> str:
        return (
            f"@{m.github_account} : an invitation to join {self.org_label} {self.service_label} "
            f"has been sent to you. {self._accept_guidance()}"
        )

    def invitation_pending(self, m: MaintainerRef) -> str:
        return (
            f"@{m.github_account} : you have a pending invitation to join {self.org_label} "
            f"{self.service_label}. {self._accept_guidance()}"
        )

    def already_member(self, m: MaintainerRef) -> str:
        return f"@{m.github_account} : you are already a {self.org_label} {self.service_label} user"

    def invitation_failed(self, m: MaintainerRef, cause: str) -> str:
        return (
            f"@{m.github_account} : there was a problem sending a {self.org_label} "
            f"{self.service_label} invitation to you: {cause}"
        )

    def no_imported_repos(self, project: ProjectRef) -> str:
        return f"The {project.name} project has not yet imported repos"

    def imported_repos(self, project: ProjectRef, count: int, links: Sequence[str]) -> str:
        shown = list(links[: self.max_listed_repos])
        hidden = count - len(shown)
        if hidden > 0 and shown:
            shown.append(f"and {hidden} more")
        listing = "<BR>".join(shown)
        msg = f"The {project.name} project team have imported {count} repo(s)"
        return f"{msg}<BR>{listing}" if listing else msg

    def imported_repos_unavailable(self, project: ProjectRef, cause: str) -> str:
        return (
            f"Could not check which repos the {project.name} project has imported into "
            f"{self.service_label}: {cause}"
        )
