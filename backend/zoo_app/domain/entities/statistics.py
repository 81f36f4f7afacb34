"""Read models derived from animals and rooms (paging, favourite statistics)."""

import math
from dataclasses import dataclass, field

from .animal import Animal


@dataclass
class AnimalPage:
    """One zero-based page of animals plus totals for the whole result set."""

    items: list[Animal]
    page: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return math.ceil(self.total_elements / self.size)


@dataclass
class FavouriteRoomStat:
    """How many animals currently list a room among their favourites."""

    room_id: str
    title: str
    count: int = field(default=0)
