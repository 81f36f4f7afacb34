from .animal_service import AnimalService
from .room_service import RoomService

__all__ = [
    "AnimalService",
    "RoomService",
]
