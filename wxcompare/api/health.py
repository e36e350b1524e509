"""Health check endpoint."""

from fastapi import APIRouter, Depends

from wxcompare.config import settings
from wxcompare.services import WeatherStore, get_weather_store

router = APIRouter()


@router.get("/healthz", summary="Health check")
def health_check(store: WeatherStore = Depends(get_weather_store)) -> dict[str, object]:
    """Simple health check endpoint."""
    return {
        "status": "ok",
        "env": settings.wxcompare_env,
        "locations": len(store.list_locations()),
    }
