"""Room CRUD endpoints and favourite-room statistics."""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from zoo_app.application.schemas.room import (
    FavouriteRoomStatResponse,
    RoomCreate,
    RoomResponse,
    RoomUpdate,
)
from zoo_app.application.services import AnimalService, RoomService
from zoo_app.config import get_settings
from zoo_app.infrastructure.dependencies import get_animal_service, get_room_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/rooms", tags=["Rooms"])


@router.get("", response_model=list[RoomResponse])
async def list_rooms(
    skip: int = Query(0, ge=0),
    limit: int = Query(get_settings().max_page_size, ge=1, le=get_settings().max_page_size),
    service: RoomService = Depends(get_room_service),
) -> list[RoomResponse]:
    """List rooms ordered by title."""
    rooms = await service.list_rooms(skip=skip, limit=limit)
    return [RoomResponse.model_validate(r, from_attributes=True) for r in rooms]


@router.get("/favourites/stats", response_model=list[FavouriteRoomStatResponse])
async def favourite_room_stats(
    service: AnimalService = Depends(get_animal_service),
) -> list[FavouriteRoomStatResponse]:
    """Number of animals favouring each room; rooms nobody favours are omitted."""
    logger.info("Fetching favourite room statistics")
    stats = await service.favourite_room_stats()
    return [FavouriteRoomStatResponse.model_validate(s, from_attributes=True) for s in stats]


@router.get("/{room_id}", response_model=RoomResponse)
async def get_room(
    room_id: str,
    service: RoomService = Depends(get_room_service),
) -> RoomResponse:
    """Retrieve a single room by ID."""
    room = await service.get_room(room_id)
    return RoomResponse.model_validate(room, from_attributes=True)


@router.post("", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
async def create_room(
    data: RoomCreate,
    response: Response,
    service: RoomService = Depends(get_room_service),
) -> RoomResponse:
    """Create a new room."""
    room = await service.create_room(data)
    logger.info("Room created id=%s title=%r", room.id, room.title)
    response.headers["Location"] = f"/rooms/{room.id}"
    return RoomResponse.model_validate(room, from_attributes=True)


@router.put("/{room_id}", response_model=RoomResponse)
async def update_room(
    room_id: str,
    data: RoomUpdate,
    service: RoomService = Depends(get_room_service),
) -> RoomResponse:
    """Rename an existing room."""
    room = await service.update_room(room_id, data)
    return RoomResponse.model_validate(room, from_attributes=True)


@router.delete("/{room_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_room(
    room_id: str,
    service: RoomService = Depends(get_room_service),
) -> None:
    """Delete a room. Animals referencing it keep the stale id."""
    await service.delete_room(room_id)
    logger.info("Room deleted id=%s", room_id)
