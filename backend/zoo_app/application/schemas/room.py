"""Pydantic DTOs (Data Transfer Objects) for the Room feature."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


def _strip_title(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("title must not be blank")
    return value


class RoomCreate(BaseModel):
    """Schema for creating a new room."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Safari"])

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return _strip_title(v)


class RoomUpdate(BaseModel):
    """Schema for updating a room; only the title is mutable."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Savannah"])

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return _strip_title(v)


class RoomResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    title: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class FavouriteRoomStatResponse(BaseModel):
    """One row of the favourite-room statistics."""

    room_id: str
    title: str
    count: int

    model_config = {"from_attributes": True}
