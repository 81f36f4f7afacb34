"""Concrete repository implementation for Animal backed by SQLAlchemy."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from zoo_app.application.interfaces import AnimalRepository, AnimalSortField
from zoo_app.domain.entities import Animal
from zoo_app.infrastructure.database.base import as_utc
from zoo_app.infrastructure.database.models import AnimalModel

_SORT_COLUMNS = {
    "title": AnimalModel.title,
    "located": AnimalModel.located,
}


class SQLAlchemyAnimalRepository(AnimalRepository):
    """Implements the AnimalRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: AnimalModel) -> Animal:
        """Map ORM model → domain entity."""
        return Animal(
            id=model.id,
            title=model.title,
            located=model.located,
            current_room_id=model.current_room_id,
            favourite_room_ids=set(model.favourite_room_ids or []),
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _to_model(self, entity: Animal) -> AnimalModel:
        """Map domain entity → ORM model (for creation)."""
        return AnimalModel(
            id=entity.id,
            title=entity.title,
            located=entity.located,
            current_room_id=entity.current_room_id,
            favourite_room_ids=sorted(entity.favourite_room_ids),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, animal_id: str) -> Animal | None:
        result = await self._session.get(AnimalModel, animal_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[Animal]:
        result = await self._session.execute(select(AnimalModel))
        return [self._to_entity(row) for row in result.scalars().all()]

    async def find_by_current_room(
        self,
        room_id: str,
        *,
        sort_by: AnimalSortField = "title",
        descending: bool = False,
        skip: int = 0,
        limit: int = 10,
    ) -> tuple[list[Animal], int]:
        column = _SORT_COLUMNS[sort_by]
        in_room = AnimalModel.current_room_id == room_id

        total = await self._session.scalar(
            select(func.count()).select_from(AnimalModel).where(in_room)
        )

        stmt = (
            select(AnimalModel)
            .where(in_room)
            .order_by(column.desc() if descending else column.asc(), AnimalModel.id.asc())
            .offset(skip)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()], total or 0

    async def create(self, animal: Animal) -> Animal:
        model = self._to_model(animal)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, animal: Animal) -> Animal:
        model = await self._session.get(AnimalModel, animal.id)
        if model is None:
            raise ValueError(f"Animal {animal.id} not found in database")
        model.title = animal.title
        model.located = animal.located
        model.current_room_id = animal.current_room_id
        model.favourite_room_ids = sorted(animal.favourite_room_ids)
        model.updated_at = animal.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, animal_id: str) -> bool:
        model = await self._session.get(AnimalModel, animal_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
