from .animal import (
    AnimalCreate,
    AnimalUpdate,
    AnimalResponse,
    AnimalPageResponse,
    PlaceAnimalRequest,
    FavouriteRoomRequest,
)
from .room import RoomCreate, RoomUpdate, RoomResponse, FavouriteRoomStatResponse

__all__ = [
    "AnimalCreate",
    "AnimalUpdate",
    "AnimalResponse",
    "AnimalPageResponse",
    "PlaceAnimalRequest",
    "FavouriteRoomRequest",
    "RoomCreate",
    "RoomUpdate",
    "RoomResponse",
    "FavouriteRoomStatResponse",
]
