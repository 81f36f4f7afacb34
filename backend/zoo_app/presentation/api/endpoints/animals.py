"""Animal CRUD, room placement and favourite-room endpoints."""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from zoo_app.application.schemas.animal import (
    AnimalCreate,
    AnimalPageResponse,
    AnimalResponse,
    AnimalUpdate,
    FavouriteRoomRequest,
    PlaceAnimalRequest,
)
from zoo_app.application.services import AnimalService
from zoo_app.config import get_settings
from zoo_app.infrastructure.dependencies import get_animal_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/animals", tags=["Animals"])


@router.post("", response_model=AnimalResponse, status_code=status.HTTP_201_CREATED)
async def create_animal(
    data: AnimalCreate,
    response: Response,
    service: AnimalService = Depends(get_animal_service),
) -> AnimalResponse:
    """Create a new animal; referenced rooms must exist."""
    animal = await service.create_animal(data)
    logger.info("Animal created id=%s title=%r", animal.id, animal.title)
    response.headers["Location"] = f"/animals/{animal.id}"
    return AnimalResponse.model_validate(animal, from_attributes=True)


@router.get("/room/{room_id}", response_model=AnimalPageResponse)
async def list_animals_in_room(
    room_id: str,
    sort_by: str = Query("title", description="title or located"),
    order: str = Query("asc", description="asc or desc (case-insensitive)"),
    page: int = Query(0, ge=0, description="Zero-based page index"),
    size: int = Query(
        get_settings().default_page_size, ge=1, le=get_settings().max_page_size,
    ),
    service: AnimalService = Depends(get_animal_service),
) -> AnimalPageResponse:
    """Retrieve a sorted, paginated list of the animals currently in a room."""
    result = await service.list_animals_in_room(
        room_id, sort_by=sort_by, order=order, page=page, size=size,
    )
    return AnimalPageResponse.model_validate(result, from_attributes=True)


@router.get("/{animal_id}", response_model=AnimalResponse)
async def get_animal(
    animal_id: str,
    service: AnimalService = Depends(get_animal_service),
) -> AnimalResponse:
    """Retrieve a single animal by ID."""
    animal = await service.get_animal(animal_id)
    return AnimalResponse.model_validate(animal, from_attributes=True)


@router.put("/{animal_id}", response_model=AnimalResponse)
async def update_animal(
    animal_id: str,
    data: AnimalUpdate,
    service: AnimalService = Depends(get_animal_service),
) -> AnimalResponse:
    """Update an existing animal."""
    animal = await service.update_animal(animal_id, data)
    return AnimalResponse.model_validate(animal, from_attributes=True)


@router.delete("/{animal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_animal(
    animal_id: str,
    service: AnimalService = Depends(get_animal_service),
) -> None:
    """Delete an animal by ID."""
    await service.delete_animal(animal_id)
    logger.info("Animal deleted id=%s", animal_id)


# ── Room placement ───────────────────────────────────────────────────


@router.post("/{animal_id}/place", response_model=AnimalResponse)
async def place_animal(
    animal_id: str,
    data: PlaceAnimalRequest,
    service: AnimalService = Depends(get_animal_service),
) -> AnimalResponse:
    """Place an animal into a room."""
    logger.info("Placing animal %s into room %s", animal_id, data.room_id)
    animal = await service.assign_animal_to_room(animal_id, data.room_id)
    return AnimalResponse.model_validate(animal, from_attributes=True)


@router.put("/{animal_id}/move", response_model=AnimalResponse)
async def move_animal(
    animal_id: str,
    data: PlaceAnimalRequest,
    service: AnimalService = Depends(get_animal_service),
) -> AnimalResponse:
    """Move an animal to another room."""
    logger.info("Moving animal %s to room %s", animal_id, data.room_id)
    animal = await service.assign_animal_to_room(animal_id, data.room_id)
    return AnimalResponse.model_validate(animal, from_attributes=True)


@router.delete("/{animal_id}/room", response_model=AnimalResponse)
async def remove_from_room(
    animal_id: str,
    service: AnimalService = Depends(get_animal_service),
) -> AnimalResponse:
    """Clear the animal's current room."""
    animal = await service.remove_animal_from_room(animal_id)
    return AnimalResponse.model_validate(animal, from_attributes=True)


# ── Favourites ───────────────────────────────────────────────────────


@router.post("/{animal_id}/favourites", response_model=AnimalResponse)
async def assign_favourite_room(
    animal_id: str,
    data: FavouriteRoomRequest,
    service: AnimalService = Depends(get_animal_service),
) -> AnimalResponse:
    """Add a room to the animal's favourites."""
    animal = await service.assign_favourite_room(animal_id, data.room_id)
    return AnimalResponse.model_validate(animal, from_attributes=True)


@router.delete("/{animal_id}/favourites/{room_id}", response_model=AnimalResponse)
async def unassign_favourite_room(
    animal_id: str,
    room_id: str,
    service: AnimalService = Depends(get_animal_service),
) -> AnimalResponse:
    """Remove a room from the animal's favourites."""
    animal = await service.unassign_favourite_room(animal_id, room_id)
    return AnimalResponse.model_validate(animal, from_attributes=True)
