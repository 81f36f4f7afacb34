"""In-memory fakes of the repository ports for service-level tests."""

import copy

import pytest

from zoo_app.application.interfaces import AnimalRepository, AnimalSortField, RoomRepository
from zoo_app.application.services import AnimalService, RoomService
from zoo_app.domain.entities import Animal, Room


class FakeRoomRepository(RoomRepository):
    """In-memory fake room repository. Stores copies, like a real store would."""

    def __init__(self):
        self._rooms: dict[str, Room] = {}

    async def get_by_id(self, room_id: str) -> Room | None:
        room = self._rooms.get(room_id)
        return copy.deepcopy(room) if room else None

    async def exists(self, room_id: str) -> bool:
        return room_id in self._rooms

    async def get_all(self, skip: int = 0, limit: int = 100) -> list[Room]:
        rooms = sorted(self._rooms.values(), key=lambda r: (r.title, r.id))
        return [copy.deepcopy(r) for r in rooms[skip : skip + limit]]

    async def create(self, room: Room) -> Room:
        self._rooms[room.id] = copy.deepcopy(room)
        return copy.deepcopy(room)

    async def update(self, room: Room) -> Room:
        if room.id not in self._rooms:
            raise ValueError(f"Room {room.id} not found")
        self._rooms[room.id] = copy.deepcopy(room)
        return copy.deepcopy(room)

    async def delete(self, room_id: str) -> bool:
        return self._rooms.pop(room_id, None) is not None


class FakeAnimalRepository(AnimalRepository):
    """In-memory fake animal repository."""

    def __init__(self):
        self._animals: dict[str, Animal] = {}

    def __len__(self) -> int:
        return len(self._animals)

    async def get_by_id(self, animal_id: str) -> Animal | None:
        animal = self._animals.get(animal_id)
        return copy.deepcopy(animal) if animal else None

    async def get_all(self) -> list[Animal]:
        return [copy.deepcopy(a) for a in self._animals.values()]

    async def find_by_current_room(
        self,
        room_id: str,
        *,
        sort_by: AnimalSortField = "title",
        descending: bool = False,
        skip: int = 0,
        limit: int = 10,
    ) -> tuple[list[Animal], int]:
        matches = [a for a in self._animals.values() if a.current_room_id == room_id]
        matches.sort(key=lambda a: a.id)
        matches.sort(key=lambda a: getattr(a, sort_by), reverse=descending)
        return [copy.deepcopy(a) for a in matches[skip : skip + limit]], len(matches)

    async def create(self, animal: Animal) -> Animal:
        self._animals[animal.id] = copy.deepcopy(animal)
        return copy.deepcopy(animal)

    async def update(self, animal: Animal) -> Animal:
        if animal.id not in self._animals:
            raise ValueError(f"Animal {animal.id} not found")
        self._animals[animal.id] = copy.deepcopy(animal)
        return copy.deepcopy(animal)

    async def delete(self, animal_id: str) -> bool:
        return self._animals.pop(animal_id, None) is not None


@pytest.fixture
def room_repository() -> FakeRoomRepository:
    return FakeRoomRepository()


@pytest.fixture
def animal_repository() -> FakeAnimalRepository:
    return FakeAnimalRepository()


@pytest.fixture
def room_service(room_repository: FakeRoomRepository) -> RoomService:
    return RoomService(room_repository)


@pytest.fixture
def animal_service(
    animal_repository: FakeAnimalRepository, room_service: RoomService
) -> AnimalService:
    return AnimalService(animal_repository, room_service)
