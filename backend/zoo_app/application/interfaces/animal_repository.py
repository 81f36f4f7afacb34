"""Abstract repository interface (port) for Animal persistence."""

from abc import ABC, abstractmethod
from typing import Literal

from zoo_app.domain.entities import Animal

AnimalSortField = Literal["title", "located"]


class AnimalRepository(ABC):
    """Port for animal persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, animal_id: str) -> Animal | None:
        """Retrieve a single animal by its ID."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Animal]:
        """Retrieve every stored animal (full scan)."""
        ...

    @abstractmethod
    async def find_by_current_room(
        self,
        room_id: str,
        *,
        sort_by: AnimalSortField = "title",
        descending: bool = False,
        skip: int = 0,
        limit: int = 10,
    ) -> tuple[list[Animal], int]:
        """Return one sorted slice of the animals in a room and the total match count."""
        ...

    @abstractmethod
    async def create(self, animal: Animal) -> Animal:
        """Persist a new animal and return it."""
        ...

    @abstractmethod
    async def update(self, animal: Animal) -> Animal:
        """Update an existing animal."""
        ...

    @abstractmethod
    async def delete(self, animal_id: str) -> bool:
        """Delete an animal. Returns True if deleted, False if not found."""
        ...
