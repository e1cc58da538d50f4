"""
maintainerd_onboard.service_clients.errors

Exceptions raised by remote service clients.

Responsibilities:
- One error type for every remote failure, so the reconciler can report it
  instead of aborting the pass.
"""

from __future__ import annotations


class ServiceClientError(Exception):
    """A remote call failed (transport error, timeout, unexpected status or payload)."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


# --- Module Notes -----------------------------------------------------------
# Clients must translate library exceptions (httpx, JSON decoding, payload shape)
# into this type; anything else escaping a client fails the whole pass.
