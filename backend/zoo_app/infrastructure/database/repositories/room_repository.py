"""Concrete repository implementation for Room backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from zoo_app.application.interfaces import RoomRepository
from zoo_app.domain.entities import Room
from zoo_app.infrastructure.database.base import as_utc
from zoo_app.infrastructure.database.models import RoomModel


class SQLAlchemyRoomRepository(RoomRepository):
    """Implements the RoomRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: RoomModel) -> Room:
        """Map ORM model → domain entity."""
        return Room(
            id=model.id,
            title=model.title,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _to_model(self, entity: Room) -> RoomModel:
        """Map domain entity → ORM model (for creation)."""
        return RoomModel(
            id=entity.id,
            title=entity.title,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, room_id: str) -> Room | None:
        result = await self._session.get(RoomModel, room_id)
        return self._to_entity(result) if result else None

    async def exists(self, room_id: str) -> bool:
        stmt = select(RoomModel.id).where(RoomModel.id == room_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def get_all(self, skip: int = 0, limit: int = 100) -> list[Room]:
        stmt = (
            select(RoomModel)
            .order_by(RoomModel.title.asc(), RoomModel.id.asc())
            .offset(skip)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, room: Room) -> Room:
        model = self._to_model(room)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, room: Room) -> Room:
        model = await self._session.get(RoomModel, room.id)
        if model is None:
            raise ValueError(f"Room {room.id} not found in database")
        model.title = room.title
        model.updated_at = room.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, room_id: str) -> bool:
        model = await self._session.get(RoomModel, room_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
