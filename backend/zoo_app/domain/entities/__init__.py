from .animal import Animal
from .room import Room
from .statistics import AnimalPage, FavouriteRoomStat

__all__ = [
    "Animal",
    "Room",
    "AnimalPage",
    "FavouriteRoomStat",
]
