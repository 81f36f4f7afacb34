"""Application service (use case) for Animal operations.

Every room reference an animal write touches is checked against the room
directory first, one lookup per reference, before anything is persisted.
"""

import logging
from collections import Counter
from collections.abc import Iterable

from zoo_app.application.interfaces import AnimalRepository
from zoo_app.application.schemas.animal import AnimalCreate, AnimalUpdate
from zoo_app.application.services.room_service import RoomService
from zoo_app.domain.entities import Animal, AnimalPage, FavouriteRoomStat
from zoo_app.domain.exceptions import DomainValidationError, EntityNotFoundError

logger = logging.getLogger(__name__)

SORT_FIELDS = ("title", "located")
SORT_ORDERS = ("asc", "desc")


class AnimalService:
    """Orchestrates animal CRUD, room placement and favourites."""

    def __init__(self, repository: AnimalRepository, room_service: RoomService):
        self._repository = repository
        self._rooms = room_service

    # ── CRUD ─────────────────────────────────────────────────────────

    async def get_animal(self, animal_id: str) -> Animal:
        logger.debug("Getting animal id=%s", animal_id)
        animal = await self._repository.get_by_id(animal_id)
        if animal is None:
            raise EntityNotFoundError("Animal", animal_id)
        return animal

    async def create_animal(self, data: AnimalCreate) -> Animal:
        logger.debug("Creating animal title=%r", data.title)
        await self._validate_room_references(data.current_room_id, data.favourite_room_ids)

        animal = Animal(
            title=data.title,
            located=data.located,
            current_room_id=_normalise_room_id(data.current_room_id),
            favourite_room_ids=set(data.favourite_room_ids or ()),
        )
        animal.updated_at = animal.created_at
        return await self._repository.create(animal)

    async def update_animal(self, animal_id: str, data: AnimalUpdate) -> Animal:
        animal = await self.get_animal(animal_id)
        logger.debug("Updating animal id=%s with %s", animal_id, data.model_dump(exclude_none=True))
        await self._validate_room_references(data.current_room_id, data.favourite_room_ids)

        animal.update(
            title=data.title,
            located=data.located,
            current_room_id=_normalise_room_id(data.current_room_id),
            favourite_room_ids=data.favourite_room_ids,
        )
        return await self._repository.update(animal)

    async def delete_animal(self, animal_id: str) -> bool:
        await self.get_animal(animal_id)
        logger.debug("Deleting animal id=%s", animal_id)
        return await self._repository.delete(animal_id)

    # ── Room placement ───────────────────────────────────────────────

    async def assign_animal_to_room(self, animal_id: str, room_id: str) -> Animal:
        """Place an animal in a room. Covers both first placement and moves."""
        logger.debug("Moving animal id=%s to room=%s", animal_id, room_id)
        animal = await self.get_animal(animal_id)
        await self._rooms.get_room(room_id)

        animal.place_in(room_id)
        return await self._repository.update(animal)

    async def remove_animal_from_room(self, animal_id: str) -> Animal:
        logger.debug("Removing animal id=%s from its current room", animal_id)
        animal = await self.get_animal(animal_id)
        animal.clear_room()
        return await self._repository.update(animal)

    # ── Favourites ───────────────────────────────────────────────────

    async def assign_favourite_room(self, animal_id: str, room_id: str) -> Animal:
        logger.debug("Adding favourite room=%s to animal=%s", room_id, animal_id)
        animal = await self.get_animal(animal_id)
        await self._rooms.get_room(room_id)

        animal.add_favourite(room_id)
        return await self._repository.update(animal)

    async def unassign_favourite_room(self, animal_id: str, room_id: str) -> Animal:
        logger.debug("Removing favourite room=%s from animal=%s", room_id, animal_id)
        animal = await self.get_animal(animal_id)
        await self._rooms.get_room(room_id)

        if not animal.is_favourite(room_id):
            raise DomainValidationError(
                f"Room {room_id} is not in favourites for animal {animal_id}"
            )

        animal.remove_favourite(room_id)
        return await self._repository.update(animal)

    # ── Queries ──────────────────────────────────────────────────────

    async def list_animals_in_room(
        self,
        room_id: str,
        *,
        sort_by: str = "title",
        order: str = "asc",
        page: int = 0,
        size: int = 10,
    ) -> AnimalPage:
        logger.debug(
            "Listing animals in room=%s sort_by=%s order=%s page=%d size=%d",
            room_id, sort_by, order, page, size,
        )
        await self._rooms.get_room(room_id)

        if sort_by not in SORT_FIELDS:
            logger.warning("Rejected sort field %r", sort_by)
            raise DomainValidationError(
                f"Invalid sort field: {sort_by}. Allowed: title, located"
            )
        direction = order.lower()
        if direction not in SORT_ORDERS:
            logger.warning("Rejected sort order %r", order)
            raise DomainValidationError(f"Invalid order: {order}. Allowed: asc, desc")
        if page < 0:
            raise DomainValidationError("Page index must not be negative")
        if size < 1:
            raise DomainValidationError("Page size must be at least 1")

        items, total = await self._repository.find_by_current_room(
            room_id,
            sort_by=sort_by,
            descending=direction == "desc",
            skip=page * size,
            limit=size,
        )
        return AnimalPage(items=items, page=page, size=size, total_elements=total)

    async def favourite_room_stats(self) -> list[FavouriteRoomStat]:
        """Count favourite references per room, recomputed from a full scan.

        Counts are keyed by room id, so two rooms sharing a title stay
        separate. Ids of rooms that no longer exist are dropped.
        """
        counts: Counter[str] = Counter()
        for animal in await self._repository.get_all():
            counts.update(animal.favourite_room_ids)

        stats: list[FavouriteRoomStat] = []
        for room_id, count in counts.items():
            try:
                room = await self._rooms.get_room(room_id)
            except EntityNotFoundError:
                logger.debug("Skipping stale favourite reference to room=%s", room_id)
                continue
            stats.append(FavouriteRoomStat(room_id=room.id, title=room.title, count=count))

        stats.sort(key=lambda s: (-s.count, s.title, s.room_id))
        return stats

    # ── Helpers ──────────────────────────────────────────────────────

    async def _validate_room_references(
        self,
        current_room_id: str | None,
        favourite_room_ids: Iterable[str] | None,
    ) -> None:
        """Fail on the first referenced room that does not exist."""
        current_room_id = _normalise_room_id(current_room_id)
        if current_room_id is not None and not await self._rooms.room_exists(current_room_id):
            raise EntityNotFoundError("Room", current_room_id)

        for room_id in sorted(favourite_room_ids or ()):
            if not await self._rooms.room_exists(room_id):
                raise EntityNotFoundError("Room", room_id)


def _normalise_room_id(room_id: str | None) -> str | None:
    if room_id is None or not room_id.strip():
        return None
    return room_id.strip()
