"""Inputs and results of the context engine."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

SeasonName = Literal["spring", "summer", "autumn", "winter"]
TimeOfDayLabel = Literal["dawn", "day", "dusk", "night"]
TimeSource = Literal["api", "fallback"]


class WeatherObservation(BaseModel):
    """Current conditions as consumed by the context engine.

    Rain is in millimetres and snowfall in centimetres, as reported by
    the weather provider. Sunrise and sunset are local wall-clock strings
    in ``YYYY-MM-DDTHH:MM`` form.
    """

    temperature: float = 0.0
    humidity: float = 0.0
    wind_speed: float = 0.0
    cloudcover: float = Field(0.0, description="Cloud cover percentage")
    rain: float = 0.0
    snowfall: float = 0.0
    sunrise: str | None = None
    sunset: str | None = None
    timezone: str | None = None


class SeasonInfo(BaseModel):
    season: SeasonName


class TimeOfDay(BaseModel):
    time_of_day: TimeOfDayLabel
    source: TimeSource


class HolidayInfo(BaseModel):
    holiday: str | None = None


class PhotoQuery(BaseModel):
    query: str
