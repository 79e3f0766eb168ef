"""Task ORM model. Live planned/delivered work item."""

from datetime import date

from sqlalchemy import Date, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import TimestampedModel


class Task(TimestampedModel, Base):
    """Logged task. ``sector`` is the project's sector name copied at assignment. Table: task."""

    __tablename__ = "task"

    project_id: Mapped[str] = mapped_column(
        String, ForeignKey("project.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    collaborator_id: Mapped[str] = mapped_column(
        String, ForeignKey("profile.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    sector: Mapped[str] = mapped_column(
        String(255), nullable=False, default="", server_default=""
    )
    planned_activity: Mapped[str] = mapped_column(Text, nullable=False)
    delivered_activity: Mapped[str] = mapped_column(
        Text, nullable=False, default="", server_default=""
    )
    priority: Mapped[str] = mapped_column(String(32), nullable=False)
    status: Mapped[str] = mapped_column(String(32), nullable=False)
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    hours_dedicated: Mapped[str] = mapped_column(
        String(16), nullable=False, default="00:00", server_default="00:00"
    )
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")

    __table_args__ = (
        Index("ix_task_collaborator_due", "collaborator_id", "due_date"),
    )
