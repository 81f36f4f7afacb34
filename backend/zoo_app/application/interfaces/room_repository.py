"""Abstract repository interface (port) for Room persistence."""

from abc import ABC, abstractmethod

from zoo_app.domain.entities import Room


class RoomRepository(ABC):
    """Port for room persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, room_id: str) -> Room | None:
        """Retrieve a single room by its ID."""
        ...

    @abstractmethod
    async def exists(self, room_id: str) -> bool:
        """Return True if a room with this ID is stored."""
        ...

    @abstractmethod
    async def get_all(self, skip: int = 0, limit: int = 100) -> list[Room]:
        """Retrieve a paginated list of rooms ordered by title."""
        ...

    @abstractmethod
    async def create(self, room: Room) -> Room:
        """Persist a new room and return it."""
        ...

    @abstractmethod
    async def update(self, room: Room) -> Room:
        """Update an existing room."""
        ...

    @abstractmethod
    async def delete(self, room_id: str) -> bool:
        """Delete a room. Returns True if deleted, False if not found."""
        ...
