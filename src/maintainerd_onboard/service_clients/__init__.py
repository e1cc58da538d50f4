"""
maintainerd_onboard.service_clients

Remote service client package.

Responsibilities:
- Provide `ServiceClient` implementations for services projects are onboarded to.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The reconciler depends on `onboarding.ports.ServiceClient`, never on httpx directly.
