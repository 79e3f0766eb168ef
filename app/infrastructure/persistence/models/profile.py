"""Profile ORM model (collaborators and admins). Table: profile."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import TimestampedModel


class Profile(TimestampedModel, Base):
    """Team member. ``sector`` is a free-text sector name. Table: profile."""

    __tablename__ = "profile"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    avatar: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")
    role: Mapped[str] = mapped_column(
        String(16), nullable=False, default="user", server_default="user"
    )
    sector: Mapped[str] = mapped_column(
        String(255), nullable=False, default="", server_default=""
    )
