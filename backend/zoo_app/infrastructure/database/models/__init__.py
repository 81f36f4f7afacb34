from .animal import AnimalModel
from .room import RoomModel

__all__ = [
    "AnimalModel",
    "RoomModel",
]
