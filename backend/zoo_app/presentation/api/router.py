"""Top-level API router. Aggregates the endpoint routers."""

from fastapi import APIRouter

from zoo_app.presentation.api.endpoints.animals import router as animals_router
from zoo_app.presentation.api.endpoints.health import router as health_router
from zoo_app.presentation.api.endpoints.rooms import router as rooms_router

router = APIRouter()
router.include_router(health_router)
router.include_router(animals_router)
router.include_router(rooms_router)
