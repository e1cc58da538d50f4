"""
maintainerd_onboard.db.models

Persistence schema for projects, maintainers and service-team mappings.

Responsibilities:
- Define ORM models mirroring the maintainerd database:
  - Project: CNCF project identity
  - Maintainer: a person maintaining exactly one project
  - Service: an external service projects are onboarded to (e.g. FOSSA)
  - ServiceTeam: Project -> remote team mapping for one Service
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import ForeignKey, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from maintainerd_onboard.db.base import Base


def _utcnow() -> datetime:
    return datetime.utcnow()


class Project(Base):
    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False, unique=True, index=True)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)

    maintainers: Mapped[list[Maintainer]] = relationship(
        back_populates="project", order_by="Maintainer.id"
    )
    service_teams: Mapped[list[ServiceTeam]] = relationship(back_populates="project")


class Maintainer(Base):
    __tablename__ = "maintainers"

    id: Mapped[int] = mapped_column(primary_key=True)
    project_id: Mapped[int] = mapped_column(ForeignKey("projects.id"), nullable=False, index=True)

    name: Mapped[str] = mapped_column(String(256), nullable=False, default="")
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    github_account: Mapped[str] = mapped_column(String(128), nullable=False)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)

    project: Mapped[Project] = relationship(back_populates="maintainers")


class Service(Base):
    __tablename__ = "services"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)
    description: Mapped[str] = mapped_column(String(512), nullable=False, default="")


class ServiceTeam(Base):
    __tablename__ = "service_teams"

    id: Mapped[int] = mapped_column(primary_key=True)
    project_id: Mapped[int] = mapped_column(ForeignKey("projects.id"), nullable=False)
    service_id: Mapped[int] = mapped_column(ForeignKey("services.id"), nullable=False)

    # Identity of the team on the remote service.
    service_team_id: Mapped[int] = mapped_column(nullable=False)
    service_team_name: Mapped[str] = mapped_column(String(256), nullable=False)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)

    project: Mapped[Project] = relationship(back_populates="service_teams")

    __table_args__ = (
        # One team per (project, service): presence means "already provisioned".
        UniqueConstraint("project_id", "service_id", name="uq_service_teams_project_service"),
        Index("ix_service_teams_service", "service_id"),
    )


# --- Module Notes -----------------------------------------------------------
# Projects and maintainers are written by other maintainerd tooling; this package
# only ever inserts ServiceTeam rows.
