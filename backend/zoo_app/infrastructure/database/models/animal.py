"""SQLAlchemy ORM model for the Animal entity."""

from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, Index, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from zoo_app.infrastructure.database.base import Base


class AnimalModel(Base):
    """ORM model mapped to the 'animals' table.

    Favourite rooms are embedded as a JSON array of room ids on the row.
    Neither room column is a foreign key: references may go stale.
    """

    __tablename__ = "animals"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    located: Mapped[date] = mapped_column(Date, nullable=False)
    current_room_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    favourite_room_ids: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_animals_current_room", "current_room_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<AnimalModel(id={self.id}, title='{self.title}', "
            f"room='{self.current_room_id}')>"
        )
