"""Weather forecast data models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ForecastDay:
    """Forecast for a single calendar day.

    Attributes:
        date: Calendar date of the forecast.
        current_temp: Temperature in °C; may be fractional.
        min_temp: Daily minimum in °C.
        max_temp: Daily maximum in °C.
        status: Condition code such as "Clear" or "Rain".
        description: Free-text condition description.
        timestamp: Source timestamp string, passed through unchanged.
    """

    date: date
    current_temp: float
    min_temp: float
    max_temp: float
    status: str
    description: str
    timestamp: str


@dataclass(frozen=True)
class WeatherReport:
    """Chronological forecast plus today's sun times."""

    forecast: tuple[ForecastDay, ...]
    sunrise: str
    sunset: str
