"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from zoo_app.application.services import AnimalService, RoomService
from zoo_app.infrastructure.database.session import get_db_session
from zoo_app.infrastructure.database.repositories import (
    SQLAlchemyAnimalRepository,
    SQLAlchemyRoomRepository,
)


async def get_room_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[RoomService, None]:
    """Provides a RoomService instance with its repository wired up."""
    yield RoomService(SQLAlchemyRoomRepository(session))


async def get_animal_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AnimalService, None]:
    """Provides an AnimalService that validates room references in the same session."""
    room_service = RoomService(SQLAlchemyRoomRepository(session))
    yield AnimalService(SQLAlchemyAnimalRepository(session), room_service)
