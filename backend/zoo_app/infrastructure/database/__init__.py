from .base import Base
from .session import engine, async_session_factory, get_db_session, init_models
from .models import AnimalModel, RoomModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "get_db_session",
    "init_models",
    "AnimalModel",
    "RoomModel",
]
