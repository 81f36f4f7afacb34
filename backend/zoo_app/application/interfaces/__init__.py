from .animal_repository import AnimalRepository, AnimalSortField
from .room_repository import RoomRepository

__all__ = [
    "AnimalRepository",
    "AnimalSortField",
    "RoomRepository",
]
