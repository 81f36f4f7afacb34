"""Application service (use case) for Room operations."""

import logging

from zoo_app.application.interfaces import RoomRepository
from zoo_app.application.schemas.room import RoomCreate, RoomUpdate
from zoo_app.domain.entities import Room
from zoo_app.domain.exceptions import DomainValidationError, EntityNotFoundError

logger = logging.getLogger(__name__)


class RoomService:
    """Orchestrates room CRUD logic. Depends on the repository port (DI).

    Deleting a room never touches animals that still reference it.
    """

    def __init__(self, repository: RoomRepository):
        self._repository = repository

    async def get_room(self, room_id: str) -> Room:
        logger.debug("Getting room id=%s", room_id)
        room = await self._repository.get_by_id(room_id)
        if room is None:
            raise EntityNotFoundError("Room", room_id)
        return room

    async def room_exists(self, room_id: str) -> bool:
        return await self._repository.exists(room_id)

    async def list_rooms(self, *, skip: int = 0, limit: int = 100) -> list[Room]:
        return await self._repository.get_all(skip=skip, limit=limit)

    async def create_room(self, data: RoomCreate) -> Room:
        title = _require_title(data.title)
        room = Room(title=title)
        room.updated_at = room.created_at
        logger.debug("Creating room title=%r", title)
        return await self._repository.create(room)

    async def update_room(self, room_id: str, data: RoomUpdate) -> Room:
        room = await self.get_room(room_id)
        room.rename(_require_title(data.title))
        logger.debug("Renamed room id=%s to %r", room_id, room.title)
        return await self._repository.update(room)

    async def delete_room(self, room_id: str) -> bool:
        await self.get_room(room_id)
        logger.debug("Deleting room id=%s", room_id)
        return await self._repository.delete(room_id)


def _require_title(title: str | None) -> str:
    if title is None or not title.strip():
        raise DomainValidationError("Room title must not be empty")
    return title.strip()
