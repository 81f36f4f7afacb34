"""Pydantic DTOs (Data Transfer Objects) for the Animal feature."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator


class AnimalCreate(BaseModel):
    """Schema for creating a new animal."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Lion"])
    located: date = Field(..., examples=["2024-05-01"])
    current_room_id: str | None = Field(None, max_length=36)
    favourite_room_ids: set[str] | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title must not be blank")
        return v


class AnimalUpdate(BaseModel):
    """Schema for updating an existing animal. All fields optional.

    Omitted or null fields keep their stored value. A given
    ``favourite_room_ids`` replaces the whole set.
    """

    title: str | None = Field(None, min_length=1, max_length=255)
    located: date | None = None
    current_room_id: str | None = Field(None, max_length=36)
    favourite_room_ids: set[str] | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("title must not be blank")
        return v


class PlaceAnimalRequest(BaseModel):
    """Request body for placing or moving an animal into a room."""

    room_id: str = Field(..., min_length=1, max_length=36)


class FavouriteRoomRequest(BaseModel):
    """Request body for adding a room to an animal's favourites."""

    room_id: str = Field(..., min_length=1, max_length=36)


class AnimalResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    title: str
    located: date
    current_room_id: str | None
    favourite_room_ids: list[str]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

    @field_validator("favourite_room_ids", mode="before")
    @classmethod
    def sort_favourites(cls, v: Any) -> list[str]:
        return sorted(v or [])


class AnimalPageResponse(BaseModel):
    """One page of animals in a room."""

    items: list[AnimalResponse]
    page: int
    size: int
    total_elements: int
    total_pages: int

    model_config = {"from_attributes": True}
