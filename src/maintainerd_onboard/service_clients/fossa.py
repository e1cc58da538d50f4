"""
maintainerd_onboard.service_clients.fossa

HTTP client for the FOSSA API.

Responsibilities:
- Create teams, send organization invitations, list a team's imported projects.
- Translate FOSSA's error payloads into typed `InvitationResult` outcomes.
- Wrap every transport/HTTP failure (timeouts included) in `ServiceClientError`.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx

from maintainerd_onboard.observability.logging import get_logger
from maintainerd_onboard.onboarding.models import (
    ImportedRepos,
    InvitationOutcome,
    InvitationResult,
    TeamRef,
)
from maintainerd_onboard.service_clients.errors import ServiceClientError
from maintainerd_onboard.settings import Settings

log = get_logger(__name__)

# Fragments of FOSSA's invitation error messages (HTTP 409/422).
_INVITE_ALREADY_EXISTS = "already an active invitation"
_USER_ALREADY_MEMBER = "already a member"

_PROJECTS_PAGE_SIZE = 100


def create_http_client(
    settings: Settings, *, transport: httpx.AsyncBaseTransport | None = None
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=settings.fossa_api_base_url,
        headers={
            "Authorization": f"Bearer {settings.fossa_api_token}",
            "Accept": "application/json",
        },
        timeout=settings.http_timeout_seconds,
        transport=transport,
    )


class FossaClient:
    def __init__(self, *, settings: Settings, http: httpx.AsyncClient) -> None:
        self._settings = settings
        self._http = http

    async def create_team(self, name: str) -> TeamRef:
        body = await self._request("POST", "/teams", json={"name": name})
        try:
            return TeamRef(id=int(body["id"]), name=str(body.get("name", name)))
        except (KeyError, TypeError, ValueError) as e:
            raise ServiceClientError(f"unexpected create-team response: {body!r}") from e

    async def send_invitation(self, email: str) -> InvitationResult:
        try:
            r = await self._http.post("/organization/invite", json={"email": email})
        except httpx.HTTPError as e:
            raise ServiceClientError(f"POST /organization/invite: {_describe(e)}") from e

        if r.is_success:
            return InvitationResult(InvitationOutcome.sent)

        message = _error_message(r)
        lowered = message.lower()
        if _INVITE_ALREADY_EXISTS in lowered:
            return InvitationResult(InvitationOutcome.already_pending)
        if _USER_ALREADY_MEMBER in lowered:
            return InvitationResult(InvitationOutcome.already_member)
        log.info("fossa_invitation_rejected", status_code=r.status_code, message=message)
        return InvitationResult.failure(f"HTTP {r.status_code}: {message}")

    async def fetch_imported_repos(self, team_id: int) -> ImportedRepos:
        body = await self._request(
            "GET",
            "/v2/projects",
            params={"teamId": team_id, "count": _PROJECTS_PAGE_SIZE},
        )
        try:
            projects = list(body.get("projects") or [])
            links = tuple(self.imported_project_links(projects))
            # `total` counts every project even when a single page is returned.
            count = int(body.get("total", len(projects)) or 0)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ServiceClientError(f"unexpected project listing response: {body!r}") from e
        return ImportedRepos(count=count, links=links)

    def imported_project_links(self, projects: list[dict[str, Any]]) -> list[str]:
        base = self._settings.fossa_app_url.rstrip("/")
        links: list[str] = []
        for p in projects:
            locator = str(p.get("id", ""))
            if not locator:
                continue
            title = str(p.get("title") or locator)
            links.append(f"[{title}]({base}/projects/{quote(locator, safe='')})")
        return links

    async def _request(self, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
        try:
            r = await self._http.request(method, url, **kwargs)
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ServiceClientError(
                f"{method} {url}: HTTP {e.response.status_code}: {_error_message(e.response)}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise ServiceClientError(f"{method} {url}: {_describe(e)}") from e

        try:
            body = r.json()
        except ValueError as e:
            raise ServiceClientError(f"{method} {url}: response is not JSON") from e
        if not isinstance(body, dict):
            raise ServiceClientError(f"{method} {url}: unexpected response shape")
        return body


def _error_message(r: httpx.Response) -> str:
    try:
        body = r.json()
    except ValueError:
        return r.text.strip() or r.reason_phrase
    if isinstance(body, dict):
        for key in ("message", "error", "errors"):
            if body.get(key):
                return str(body[key])
    return str(body)


def _describe(e: httpx.HTTPError) -> str:
    if isinstance(e, httpx.TimeoutException):
        return f"timed out ({type(e).__name__})"
    return str(e) or type(e).__name__


# --- Module Notes -----------------------------------------------------------
# Only this module knows FOSSA's error wording; the reconciler branches on
# `InvitationOutcome` values.
