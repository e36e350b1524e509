"""Fetch and conversion collaborators for the weather store."""

from .converter import convert_to_weather_metric
from .weather import WeatherFetcher

__all__ = ["WeatherFetcher", "convert_to_weather_metric"]
