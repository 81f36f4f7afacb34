"""Domain entity for a zoo animal."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import uuid4


@dataclass
class Animal:
    """Core domain entity for an animal.

    Room references are weak: ``current_room_id`` and ``favourite_room_ids``
    hold plain room identifiers that are validated when written, never
    afterwards. A room deleted later leaves a stale id behind.
    """

    title: str
    located: date
    id: str = field(default_factory=lambda: str(uuid4()))
    current_room_id: str | None = None
    favourite_room_ids: set[str] = field(default_factory=set)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(
        self,
        title: str | None = None,
        located: date | None = None,
        current_room_id: str | None = None,
        favourite_room_ids: set[str] | None = None,
    ) -> None:
        """Update mutable fields and refresh the updated_at timestamp.

        ``None`` means "leave unchanged"; clearing the current room goes
        through :meth:`clear_room`.
        """
        if title is not None:
            self.title = title
        if located is not None:
            self.located = located
        if current_room_id is not None:
            self.current_room_id = current_room_id
        if favourite_room_ids is not None:
            self.favourite_room_ids = set(favourite_room_ids)
        self.touch()

    def place_in(self, room_id: str) -> None:
        self.current_room_id = room_id
        self.touch()

    def clear_room(self) -> None:
        self.current_room_id = None
        self.touch()

    def add_favourite(self, room_id: str) -> None:
        self.favourite_room_ids.add(room_id)
        self.touch()

    def remove_favourite(self, room_id: str) -> None:
        self.favourite_room_ids.discard(room_id)
        self.touch()

    def is_favourite(self, room_id: str) -> bool:
        return room_id in self.favourite_room_ids

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
