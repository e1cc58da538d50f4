"""
maintainerd_onboard.services

Service-layer package.

Responsibilities:
- Own transaction boundaries and persistence decisions.
- Compose the Store, Service client and reconciliation core for one pass.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services should be pure Python and easily testable with fake clients/sessions.
