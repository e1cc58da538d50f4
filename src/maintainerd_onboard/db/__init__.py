"""
maintainerd_onboard.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, engine/session setup, repositories, and the `Store`
  implementation consumed by the onboarding core.
"""

# Package marker.
