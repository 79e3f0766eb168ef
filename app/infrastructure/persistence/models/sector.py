"""Sector and Project ORM models (reference data)."""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import TimestampedModel


class Sector(TimestampedModel, Base):
    """Organisational sector. Table: sector."""

    __tablename__ = "sector"

    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)


class Project(TimestampedModel, Base):
    """Project belonging to one sector. Table: project."""

    __tablename__ = "project"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    sector_id: Mapped[str] = mapped_column(
        String, ForeignKey("sector.id", ondelete="RESTRICT"), nullable=False, index=True
    )
