"""Error types raised by the weather store and its collaborators."""

from __future__ import annotations


class WeatherStoreError(RuntimeError):
    """Base class for weather store failures."""


class FetchError(WeatherStoreError):
    """Network failure or non-2xx response while fetching provider JSON."""

    def __init__(self, message: str, *, url: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DecodeError(WeatherStoreError):
    """Response body was not valid JSON."""


class ConversionError(WeatherStoreError):
    """A raw hourly reading could not be converted into a metric."""


class DatasetKeyError(WeatherStoreError, KeyError):
    """Unknown sample dataset key."""

    def __init__(self, dataset_key: str):
        super().__init__(f"Invalid dataset key: {dataset_key}")
        self.dataset_key = dataset_key

    def __str__(self) -> str:
        return self.args[0]


__all__ = [
    "ConversionError",
    "DatasetKeyError",
    "DecodeError",
    "FetchError",
    "WeatherStoreError",
]
