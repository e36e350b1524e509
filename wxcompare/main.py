"""FastAPI application entry point for the wxcompare weather store."""

from __future__ import annotations

import contextlib
import logging
import time

from fastapi import FastAPI, Request

from wxcompare.api import api_router
from wxcompare.config import settings
from wxcompare.errors import WeatherStoreError
from wxcompare.services import get_weather_store

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger("wxcompare")


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    """Optionally warm the store with the default sample dataset."""

    if settings.preload_sample_data:
        try:
            await get_weather_store().load_sample_data()
            logger.info("Default sample dataset preloaded")
        except WeatherStoreError as exc:
            logger.warning("Sample preload failed; starting with an empty store: %s", exc)

    yield


app = FastAPI(title="wxcompare", lifespan=lifespan)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log basic request information for observability."""

    start_time = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start_time) * 1000
    logger.info(
        "HTTP %s %s -> %s (%.2f ms)",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


app.include_router(api_router)


@app.get("/", summary="Root")
def read_root() -> dict[str, str]:
    """Basic root endpoint for quick verification."""

    return {"message": "wxcompare weather store is running"}
