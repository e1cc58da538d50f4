"""
maintainerd_onboard.api.__main__

Entrypoint for running the API via `python -m maintainerd_onboard.api`.

Responsibilities:
- Load settings and refuse to start in prod without a FOSSA token.
- Create the app and start uvicorn with structlog-compatible logging config.
"""

from __future__ import annotations

import uvicorn

from maintainerd_onboard.api.app import create_app
from maintainerd_onboard.settings import Settings, get_settings


def check_startup_settings(settings: Settings) -> None:
    if settings.env == "prod" and not settings.fossa_api_token:
        raise SystemExit("ERROR: environment variable FOSSA_API_TOKEN is not set")


def main() -> None:
    settings = get_settings()
    check_startup_settings(settings)
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()


# --- Module Notes -----------------------------------------------------------
# dev/test start without a token so /healthz and local seeding still work; /readyz
# reports the missing token instead.
