"""Context engine - season, holiday and time of day, and the photo query built from them."""

from idleview.context.calendar import festive, holiday, season
from idleview.context.engine import ContextEngine, photo_query, time_of_day
from idleview.context.models import (
    HolidayInfo,
    PhotoQuery,
    SeasonInfo,
    TimeOfDay,
    WeatherObservation,
)
from idleview.context.sun import SunTimeCache

__all__ = [
    "ContextEngine",
    "HolidayInfo",
    "PhotoQuery",
    "SeasonInfo",
    "SunTimeCache",
    "TimeOfDay",
    "WeatherObservation",
    "festive",
    "holiday",
    "photo_query",
    "season",
    "time_of_day",
]
