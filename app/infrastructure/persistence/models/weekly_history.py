"""WeeklyHistory ORM model. Write-once archive of a closed week."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CuidMixin


class WeeklyHistory(CuidMixin, Base):
    """Closed week: statistics plus JSON snapshots of tasks and board tasks.

    Only ``title`` is updated after insert. Table: weekly_history.
    """

    __tablename__ = "weekly_history"

    title: Mapped[str | None] = mapped_column(String(200), nullable=True)
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    total_hours: Mapped[str] = mapped_column(String(16), nullable=False)
    tasks_completed: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    tasks_pending: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    tasks_snapshot: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False)
    board_tasks_snapshot: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON, nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
    timezone: Mapped[str] = mapped_column(String(64), nullable=False, default="UTC")
