"""API routers for the weather comparison store."""

from fastapi import APIRouter

from .health import router as health_router
from .selection import router as selection_router
from .weather import router as weather_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(weather_router)
api_router.include_router(selection_router)

__all__ = ["api_router"]
