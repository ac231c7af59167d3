"""Time-of-day classification and photo query composition.

Every function here is total: missing or malformed inputs degrade to a
documented fallback instead of raising.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Final

from idleview.context.calendar import festive, holiday, season
from idleview.context.models import (
    HolidayInfo,
    PhotoQuery,
    SeasonInfo,
    TimeOfDay,
    TimeOfDayLabel,
    WeatherObservation,
)
from idleview.context.sun import SunTimeCache

logger: Final = logging.getLogger(__name__)

# Half-width of the dawn and dusk windows around sunrise and sunset
TWILIGHT: Final = timedelta(minutes=30)

# Precipitation above these amounts counts as "snowy"/"rainy"
SNOW_THRESHOLD_CM: Final = 0.5
RAIN_THRESHOLD_MM: Final = 0.5

# Cloud cover (%) above which a daytime query becomes "cloudy"
CLOUDY_THRESHOLD: Final = 70.0

FALLBACK_TIME_OF_DAY: Final = TimeOfDay(time_of_day="night", source="fallback")


def _wall_clock(now: datetime) -> datetime:
    """Drop tzinfo so *now* compares with naive local sun times."""
    return now.replace(tzinfo=None)


def classify_time_of_day(now: datetime, sunrise: datetime, sunset: datetime) -> TimeOfDayLabel:
    """Place *now* in the dawn/day/dusk/night partition of one day."""
    dawn_start, dawn_end = sunrise - TWILIGHT, sunrise + TWILIGHT
    dusk_start, dusk_end = sunset - TWILIGHT, sunset + TWILIGHT

    if now < dawn_start or now > dusk_end:
        return "night"
    if dawn_start <= now <= dawn_end:
        return "dawn"
    if dusk_start <= now <= dusk_end:
        return "dusk"
    return "day"


def time_of_day(
    now: datetime,
    sunrise: str | None = None,
    sunset: str | None = None,
    cache: SunTimeCache | None = None,
) -> TimeOfDay:
    """Classify *now* against the sunrise/sunset strings.

    Args:
        now: Local wall-clock time
        sunrise: Sunrise as ``YYYY-MM-DDTHH:MM``
        sunset: Sunset as ``YYYY-MM-DDTHH:MM``
        cache: Sun-time cache to reuse parsed values (a private one is used if None)

    Returns:
        The label with source ``api``, or night/``fallback`` when either
        time is missing or unparseable
    """
    if not sunrise or not sunset:
        return FALLBACK_TIME_OF_DAY

    resolved = (cache or SunTimeCache()).resolve(sunrise, sunset)
    if resolved is None:
        return FALLBACK_TIME_OF_DAY

    label = classify_time_of_day(_wall_clock(now), *resolved)
    return TimeOfDay(time_of_day=label, source="api")


def photo_query(
    weather: WeatherObservation,
    now: datetime,
    sunrise: str | None = None,
    sunset: str | None = None,
    festive_enabled: bool = True,
    cache: SunTimeCache | None = None,
) -> PhotoQuery:
    """Compose the photo search phrase for the current conditions.

    Festive windows win outright. Otherwise night/dawn/dusk take priority
    over daytime phrasing, and precipitation over cloud cover.

    Args:
        weather: Current observation (cloud cover, rain, snowfall)
        now: Local wall-clock time
        sunrise: Overrides ``weather.sunrise`` when given
        sunset: Overrides ``weather.sunset`` when given
        festive_enabled: Whether holiday themes may replace the query
        cache: Sun-time cache shared with :func:`time_of_day`

    Returns:
        The query, e.g. "autumn rainy night" or "christmas"
    """
    if festive_enabled:
        theme = festive(now)
        if theme:
            return PhotoQuery(query=theme)

    tod = time_of_day(now, sunrise or weather.sunrise, sunset or weather.sunset, cache)
    name = season(now)
    has_snow = weather.snowfall > SNOW_THRESHOLD_CM
    has_rain = weather.rain > RAIN_THRESHOLD_MM

    if tod.time_of_day == "night":
        if has_snow:
            query = f"{name} snowy night"
        elif has_rain:
            query = f"{name} rainy night"
        else:
            query = f"{name} night"
    elif tod.time_of_day == "dawn":
        query = f"{name} dawn"
    elif tod.time_of_day == "dusk":
        query = f"{name} dusk"
    elif has_snow:
        query = f"{name} snow"
    elif has_rain:
        query = f"{name} rain"
    elif weather.cloudcover > CLOUDY_THRESHOLD and name != "winter":
        query = f"{name} cloudy"
    else:
        query = name

    logger.debug("Photo query %r (time of day %s/%s)", query, tod.time_of_day, tod.source)
    return PhotoQuery(query=query)


class ContextEngine:
    """Context engine bound to a clock and a shared sun-time cache.

    The clock defaults to the local time of the host.
    """

    def __init__(
        self,
        cache: SunTimeCache | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.cache = cache or SunTimeCache()
        self.clock = clock

    def now(self) -> datetime:
        return self.clock()

    def season(self) -> SeasonInfo:
        return SeasonInfo(season=season(self.now()))

    def holiday(self) -> HolidayInfo:
        return HolidayInfo(holiday=holiday(self.now()))

    def time_of_day(self, sunrise: str | None = None, sunset: str | None = None) -> TimeOfDay:
        return time_of_day(self.now(), sunrise, sunset, self.cache)

    def photo_query(
        self,
        weather: WeatherObservation,
        sunrise: str | None = None,
        sunset: str | None = None,
        festive_enabled: bool = True,
    ) -> PhotoQuery:
        return photo_query(weather, self.now(), sunrise, sunset, festive_enabled, self.cache)
