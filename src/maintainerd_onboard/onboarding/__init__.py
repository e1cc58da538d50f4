"""
maintainerd_onboard.onboarding

Onboarding reconciliation core.

Responsibilities:
- Value types exchanged with the Store and ServiceClient boundaries.
- The Reconciler (decide + perform remote actions) and the Runner (load, reconcile, render).
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing in this package imports SQLAlchemy or httpx; both sides are reached through
# the protocols in `onboarding.ports`.
