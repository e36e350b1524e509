"""Fetch provider JSON for sample datasets and the weather API proxy."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from wxcompare.config import settings
from wxcompare.domain.samples import SampleDataSet
from wxcompare.errors import DecodeError, FetchError

logger = logging.getLogger("wxcompare.ingestors.weather")


def _join_url(base_url: str, path: str) -> str:
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


class WeatherFetcher:
    """Retrieve Visual Crossing style timeline payloads over HTTP."""

    def __init__(
        self,
        *,
        sample_base_url: str | None = None,
        api_base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.sample_base_url = sample_base_url or settings.sample_data_base_url
        self.api_base_url = api_base_url or settings.weather_api_base_url
        self.timeout = timeout or settings.fetch_timeout
        self.transport = transport

    async def fetch_sample(self, dataset: SampleDataSet) -> Any:
        return await self.fetch_json(_join_url(self.sample_base_url, dataset.data))

    async def fetch_location(self, location: str) -> Any:
        path = f"/api/weather/{quote(location, safe='')}"
        return await self.fetch_json(_join_url(self.api_base_url, path))

    async def fetch_json(self, url: str) -> Any:
        """GET ``url`` and decode its JSON body.

        Network failures and non-2xx responses raise ``FetchError``; a body that
        is not JSON raises ``DecodeError``.
        """

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.TimeoutException as exc:
            logger.error("Weather request timed out: %s", exc)
            raise FetchError("Weather service timeout", url=url) from exc
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Weather service returned error: status=%s url=%s",
                exc.response.status_code,
                url,
            )
            raise FetchError(
                "Failed to fetch weather data",
                url=url,
                status_code=exc.response.status_code,
            ) from exc
        except httpx.RequestError as exc:
            logger.error("Weather request failed: %s", exc)
            raise FetchError("Weather request failed", url=url) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            logger.error("Failed to parse weather JSON from %s: %s", url, exc)
            raise DecodeError(f"Malformed JSON from {url}") from exc

        logger.debug("Fetched weather payload from %s", url)
        return payload


__all__ = ["WeatherFetcher"]
